"""Registry of special forms for the Linsl evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary application, so these heads
can never be shadowed by user bindings.
"""

from linsl.evaluation.reserved import DEFINE, IF, LAMBDA, MACRO, QUOTE
from linsl.evaluation.special_forms.define_form import define_form
from linsl.evaluation.special_forms.if_form import if_form
from linsl.evaluation.special_forms.lambda_form import lambda_form, macro_form
from linsl.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    DEFINE: define_form,
    IF: if_form,
    LAMBDA: lambda_form,
    MACRO: macro_form,
    QUOTE: quote_form,
}
