# engine/exceptions.py

class SloComputerError(Exception):
    pass


class ValidationError(SloComputerError, ValueError):
    pass


class UnknownInstanceError(SloComputerError, LookupError):

    def __init__(self, instance_type: str) -> None:
        super().__init__(f"unsupported instance type: {instance_type}")
        self.instance_type = instance_type


class DegenerateComputationError(SloComputerError, ArithmeticError):
    pass


class ConfigError(SloComputerError):
    pass
