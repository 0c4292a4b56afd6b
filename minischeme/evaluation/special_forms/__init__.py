"""Registry of special forms.

Special forms are looked up like any other procedure, but receive their
operands unevaluated.
"""

from minischeme.types.procedure import Procedure
from minischeme.evaluation.special_forms.quote_forms import quote_form
from minischeme.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    "quote": Procedure("quote", quote_form, special=True),
    "and": Procedure("and", and_form, special=True),
    "or": Procedure("or", or_form, special=True),
}
