"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownStrategyError(DomainException):
    """Strategy tag does not name a supported payoff strategy"""

    pass


class InvalidHorizonError(DomainException):
    """Simulation horizon cap must allow at least one period"""

    pass
