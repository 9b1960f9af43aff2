class TextHumanError(Exception):
    """Base class for domain errors raised by the rewrite and account services."""


class EmptyInputError(TextHumanError):
    def __init__(self) -> None:
        super().__init__("Please enter some text to rewrite.")


class ResponseFormatError(TextHumanError):
    """An upstream answered successfully but with none of the accepted result fields."""


class InsufficientCreditsError(TextHumanError):
    def __init__(self) -> None:
        super().__init__("No credits remaining. Please upgrade your plan to get more credits.")


class InvalidCredentialsError(TextHumanError):
    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class AccountExistsError(TextHumanError):
    def __init__(self) -> None:
        super().__init__("User with this email already exists")


class UnknownPlanError(TextHumanError):
    def __init__(self, plan: str) -> None:
        super().__init__(f"Unknown plan: {plan}")
        self.plan = plan
