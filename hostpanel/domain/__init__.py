"""Domain layer - Pure business logic.

Structure:
- entities/: Identity, SuIdentity, AccountStatus, LoginAttempt
- enums/: UserType, AuthResultCode, AuthPhase, HashAlgorithm, ConfigKey
- events/: Domain events (things that happened in the domain)
- protocols/: Ports implemented by infrastructure adapters
- errors/: User-facing authentication messages

The domain layer has NO dependencies on any framework or infrastructure.
"""
