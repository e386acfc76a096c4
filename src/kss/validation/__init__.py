from kss.validation.validator import validate

__all__ = ["validate"]
