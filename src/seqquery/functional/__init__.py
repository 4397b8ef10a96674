"""Functional primitives for seqquery.

This package holds the query helpers themselves: extremum search, resilient
key lookup, fixed-size windows and sampling without replacement. Every
function is stateless, leaves the caller's collections untouched (apart from
the explicitly mutating ``try_pop_one``) and reports "nothing found" through
return values rather than exceptions.
"""
