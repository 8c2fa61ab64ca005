"""Abstract ports for chainlist.

Interfaces declare the contract every list backend must satisfy, together
with the errors that contract raises. Concrete storage lives in
``chainlist.adapters``.
"""
