"""
Core domain models, mathematical primitives, and invariants.

Arbitrary-precision decimal integer: magnitude arithmetic (core.math),
the signed BigInteger value type (core.domain) and its JSON contract
(core.contracts).
"""
