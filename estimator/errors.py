class EstimatorError(Exception): pass


class InvalidCategoryError(EstimatorError, ValueError):
    """Debt category outside the fixed set."""


class InvalidFieldError(EstimatorError, ValueError):
    """Entry field other than 'category' or 'amount_text'."""


class SettingsError(EstimatorError): pass
