from .console_confirmation import ConsoleConfirmation

__all__ = ["ConsoleConfirmation"]
