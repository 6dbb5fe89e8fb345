class CalculatorError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class InvalidCharacterError(CalculatorError):
    """An unrecognized character or identifier run in the input."""

    def __init__(self, character, position, message=None, code="3100"):
        if message is None:
            message = f"Invalid character '{character}' at position {position}"
        super().__init__(message, code=code)
        self.character = character
        self.position = position


class SyntaxError(CalculatorError):
    """The token sequence does not match the grammar."""

    def __init__(self, message, position=None, code="3011"):
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message, code=code)
        self.position = position


class MathError(CalculatorError):
    pass


class NestingDepthError(CalculatorError):
    def __init__(self, depth, code="3013", message=None):
        if message is None:
            message = f"Expression is nested too deeply (limit {depth})"
        super().__init__(message, code=code)
        self.depth = depth


class HistoryError(CalculatorError):
    pass


Error_Dictionary = {

    "2": "Scientific Calculation Error",
    "3": "Calculator Error",
    "4": "UI Error",
    "6": "History Error",
    "9": "Unexpected Error"

}

# Error codes are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "2001": "Square root of a negative number.",
    "2002": "Logarithm argument must be positive.",
    "2003": "Natural logarithm argument must be positive.",
    "2004": "Inverse sine outside of [-1, 1].",
    "2005": "Inverse cosine outside of [-1, 1].",
    "2006": "Factorial requires an integer.",
    "2007": "Factorial of a negative number.",
    "2008": "Factorial too big.",
    "2009": "Unknown function: ",  # + function name

    "3003": "Division by Zero",
    "3004": "Invalid Operator: ",  # + operator
    "3008": "More than one '.' in one number.",
    "3009": "Missing ')'. ",
    "3010": "Missing '('. ",
    "3011": "Unexpected Token: ",  # + Token
    "3012": "Unexpected Token after expression.",
    "3013": "Expression nested too deeply.",
    "3014": "Expression too long to evaluate.",
    "3100": "Invalid character.",
    "3101": "Unknown function name.",
    "3102": "Unknown constant.",
    "3219": "Unknown constant.",

    "4002": "Calculation already Running!",
    "4003": "No value in Ans.",

    "6001": "History file is corrupt.",
    "6002": "History could not be saved.",

    "9999": "Unexpected Error: "  # + error
}
