"""
place-tools: expand builtin macro markers inside token sequences.

The usual entry point is `placetools.place.place`, which takes a list of tokens
(see `placetools.tokens`, or get some from `placetools.scanning.scan`) and returns
the list with every marker expanded. Each builtin is also available on its own
through `placetools.place.invoke`.
"""
