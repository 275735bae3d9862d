from sheq.evaluation.special_forms.if_form import if_form
from sheq.evaluation.special_forms.lambda_form import lambda_form

__all__ = ["if_form", "lambda_form"]
