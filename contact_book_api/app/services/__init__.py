"""
Service layer.

Holds the validation rules, the record store implementations and the
contact service that ties them together.
"""
