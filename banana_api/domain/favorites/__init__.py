"""
Favorites bounded context — domain layer.

A user, identified by a derived key, holds a set of favorited prompt
ids. Favoriting is a toggle: the same call adds or removes the prompt.
"""
