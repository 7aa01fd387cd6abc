"""Domain layer - Donut shop model, aggregation and purchase rules.

This layer contains:
- Entities: Objects with identity and lifecycle (CreditCard)
- Value Objects: Immutable objects defined by their attributes (Donut, Payment, Purchase, CardId)
- Purchasing: The side-effect-free purchase builder
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
