"""Money formatting helpers for the Voyage storefront.

Prices are kept in integer minor units (cents) and rendered through a
template holding one ``{{ word }}`` placeholder, e.g. ``"${{amount}}"`` or
``"{{amount_with_comma_separator}} EUR"``. The word picks the precision and
separators; everything else in the template is copied through untouched.

Template problems are configuration errors and raise. Bad amounts are
runtime data and always render as zero.
"""
import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = '${{amount}}'
PLACEHOLDER_RE = re.compile(r'\{\{\s*(\w+)\s*\}\}')

_HUNDRED = Decimal(100)
# Amounts of 10**30 minor units or more render as zero.
MAX_AMOUNT_DIGITS = 30


class MoneyFormatError(ValueError):
    """Base class for money template errors."""


class MalformedTemplateError(MoneyFormatError):
    def __init__(self, template):
        self.template = template
        super().__init__(f'Money format {template!r} has no {{{{ amount }}}} placeholder.')


class UnknownFormatModeError(MoneyFormatError):
    def __init__(self, word):
        self.word = word
        super().__init__(f'Unknown money format placeholder {word!r}.')


class FormatMode(Enum):
    AMOUNT = ('amount', 2, ',', '.')
    AMOUNT_NO_DECIMALS = ('amount_no_decimals', 0, ',', '.')
    AMOUNT_WITH_COMMA_SEPARATOR = ('amount_with_comma_separator', 2, '.', ',')
    AMOUNT_NO_DECIMALS_WITH_COMMA_SEPARATOR = ('amount_no_decimals_with_comma_separator', 0, '.', ',')

    def __init__(self, word, precision, thousands, decimal):
        self.word = word
        self.precision = precision
        self.thousands = thousands
        self.decimal = decimal

    @classmethod
    def from_word(cls, word):
        for mode in cls:
            if mode.word == word:
                return mode
        raise UnknownFormatModeError(word)


@dataclass(frozen=True)
class NumericAmount:
    """Minor units given as a number (int, float or Decimal)."""
    value: object

    def minor_units(self):
        value = self.value
        if value is None or isinstance(value, bool):
            return None
        try:
            if isinstance(value, float):
                units = Decimal(str(value))
            else:
                units = Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            logger.debug('Unparseable amount %r rendered as zero', value)
            return None
        return _checked_units(units, value)


@dataclass(frozen=True)
class TextAmount:
    """Minor units given as text; every '.' is dropped before parsing."""
    text: str

    def minor_units(self):
        digits = self.text.replace('.', '').strip()
        try:
            units = Decimal(digits)
        except InvalidOperation:
            logger.debug('Unparseable amount %r rendered as zero', self.text)
            return None
        return _checked_units(units, self.text)


def _checked_units(units, raw):
    if not units.is_finite():
        logger.debug('Non-finite amount %r rendered as zero', raw)
        return None
    if not units.is_zero() and units.adjusted() >= MAX_AMOUNT_DIGITS:
        logger.debug('Out of range amount %r rendered as zero', raw)
        return None
    return units


def to_amount(value):
    """Wrap a raw price value in the matching amount type."""
    if isinstance(value, (NumericAmount, TextAmount)):
        return value
    if isinstance(value, str):
        return TextAmount(value)
    return NumericAmount(value)


def _group_thousands(digits, separator):
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def render_decimal(minor_units, precision=2, thousands=',', decimal='.'):
    """Render minor units as a major-unit string.

    ``minor_units`` is a count of cents in any form ``to_amount`` accepts.
    Unparseable, non-finite and out of range values render as zero.
    Rounding is half away from zero.
    """
    units = to_amount(minor_units).minor_units()
    if units is None:
        units = Decimal(0)

    with localcontext() as ctx:
        ctx.prec = 50
        major = (units / _HUNDRED).quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)

    sign = '-' if major < 0 and not major.is_zero() else ''
    integer, _, fraction = format(abs(major), 'f').partition('.')
    rendered = sign + _group_thousands(integer, thousands)
    if precision and fraction:
        rendered += decimal + fraction
    return rendered


class MoneyFormatter:
    """Formats prices against a template, falling back to a fixed default.

    The default template is checked when the formatter is built so a bad
    shop setting fails at startup instead of on the first rendered price.
    """

    def __init__(self, default_template=None):
        self.default_template = default_template or DEFAULT_TEMPLATE
        self._parse(self.default_template)

    def __repr__(self):
        return f'MoneyFormatter({self.default_template!r})'

    @staticmethod
    def _parse(template):
        match = PLACEHOLDER_RE.search(template)
        if match is None:
            raise MalformedTemplateError(template)
        return match, FormatMode.from_word(match.group(1))

    def format(self, amount, template=None):
        """Return ``amount`` (minor units) rendered into ``template``."""
        template = template or self.default_template
        match, mode = self._parse(template)
        value = render_decimal(amount, mode.precision, mode.thousands, mode.decimal)
        return template[:match.start()] + value + template[match.end():]


_fallback_formatter = MoneyFormatter()


def format_money(amount, template=None):
    """Format with the built-in ``${{amount}}`` default."""
    return _fallback_formatter.format(amount, template)
