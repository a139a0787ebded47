"""Car systems package.

Each part of the car owns exactly one concern: the vehicle record, fuel
storage, distance, gear selection, combustion and the key switch. The
``Car`` aggregate composes them and delegates to them.
"""
