"""Infrastructure adapters.

Implementations of domain ports that talk to the outside world
(terminals, log handlers).
"""
