"""Registry of special forms for the Monkey evaluator.

Maps callee names to handler functions that receive their arguments as
unevaluated syntax. The evaluator consults this table before ordinary
function application.
"""

from monkey.evaluation.special_forms.quote_forms import quote_form, unquote_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "unquote": unquote_form,
}
