"""Ordered PII redaction ruleset.

Order is part of the contract:
1. email           - before urls, so addresses inside links are caught whole.
2. url
3. credit_card     - full 13-16 digit numbers.
4. card_ending     - after credit_card, so a full number is not read as a
                     partial "ending in" reference.
5. phone           - after both card rules, so card fragments are not
                     taken for phone numbers.
6. ssn
7. passport        - 6-9 char alphanumeric tokens; pure 6 or 8 digit runs
                     are dates and stay. Pure digit tokens directly after
                     an account label are left for rule 8.
8. account_number  - keeps the label, drops the digits.

No placeholder contains a digit, "@", "www." or a scheme, so running the
ruleset over its own output changes nothing.
"""

import re

from tripdoc.sanitization.models import RedactionRule

EMAIL_TOKEN = "[EMAIL REMOVED]"
URL_TOKEN = "[URL REMOVED]"
CREDIT_CARD_TOKEN = "[CREDIT CARD REMOVED]"
CARD_ENDING_TOKEN = "[CARD ENDING REMOVED]"
PHONE_TOKEN = "[PHONE NUMBER REMOVED]"
SSN_TOKEN = "[SSN REMOVED]"
ID_NUMBER_TOKEN = "[ID NUMBER REMOVED]"
ACCOUNT_NUMBER_TOKEN = "[ACCOUNT NUMBER REMOVED]"

_EMAIL_RE = re.compile(r"[\w.%+-]+@[\w.-]+\.\w{2,}")

_URL_RE = re.compile(
    r"(?:https?://|www\.)"
    r"[^\s<>\"'\[\]]*"
    r"[^\s<>\"'\[\].,;:!?)]",  # trailing punctuation belongs to the sentence
    re.IGNORECASE,
)

_CREDIT_CARD_RE = re.compile(r"\b(?:\d[ -]?){12,15}\d\b")

_MASK = r"[*xX•.]"
_CARD_ENDING_RE = re.compile(
    # "ending in 1234", "ends with ****1234"
    rf"\b(?:ending|ends)\s+(?:in|with)\s*[:#]?\s*(?:{_MASK}+[\s-]?)?\d{{4}}\b"
    # "ending ****1234"
    rf"|\bending\s*[:#]?\s*{_MASK}+[\s-]?\d{{4}}\b"
    # "Visa ending 1234", "card ending: 1234"
    r"|\b(?:card|account|acct|visa|mastercard|amex|debit|credit)\s+ending\s*[:#]?\s*\d{4}\b"
    # "last 4 digits: 1234", "last four of your card 1234"
    r"|\blast\s+(?:4|four)(?:\s+digits)?(?:\s+of\s+(?:your\s+)?(?:card|account))?"
    r"\s*[:#]?\s*\d{4}\b"
    # "card #: ...1234", "account ****1234"
    rf"|\b(?:card|account|acct)(?:\s+(?:no\.?|number|#))?\s*[:#]?\s*{_MASK}{{2,}}[\s-]?\d{{4}}\b"
    # "xxxx xxxx xxxx 1234", "**** 1234"
    r"|(?<!\w)(?:[*xX•]{4}[\s-]?){1,3}\d{4}\b",
    re.IGNORECASE,
)

_PHONE_RE = re.compile(
    r"(?<!\w)"
    r"(?:\+?\d{1,3}[\s.-]?)?"
    r"(?:\(\d{3}\)|\d{3})[\s.-]?"
    r"\d{3}[\s.-]?"
    r"\d{4}"
    r"(?!\w)",
)

_SSN_RE = re.compile(r"\b\d{3}([-\s])\d{2}\1\d{4}\b")

_ACCOUNT_LABEL = (
    r"(?:frequent(?:[\s-]+fl[yi]er)?|account|acct|a/c|membership|member|mbr|loyalty|ffn?)"
    r"(?:\s+(?:number|num|no\.?|#|id))?"
)
_ACCOUNT_SEPARATOR = r"\s*[:#]?\s*"

_ACCOUNT_RE = re.compile(
    rf"\b({_ACCOUNT_LABEL}){_ACCOUNT_SEPARATOR}"
    r"(?:\d{4}[\s-]\d{4}[\s-]\d{4}|\d{5,})\b",
    re.IGNORECASE,
)
_ACCOUNT_LABEL_TAIL_RE = re.compile(
    rf"\b{_ACCOUNT_LABEL}{_ACCOUNT_SEPARATOR}$",
    re.IGNORECASE,
)
_LABEL_LOOKBACK = 80

_PASSPORT_RE = re.compile(
    r"\b"
    r"(?=[A-Za-z]*\d)"  # at least one digit
    r"(?!\d{6}\b)(?!\d{8}\b)"  # YYMMDD / YYYYMMDD dates
    r"[A-Za-z0-9]{6,9}"
    r"\b",
)


def _follows_account_label(match: re.Match[str]) -> bool:
    start = match.start()
    window_start = max(0, start - _LABEL_LOOKBACK)
    return _ACCOUNT_LABEL_TAIL_RE.search(match.string, window_start, start) is not None


def _redact_id_number(match: re.Match[str]) -> str:
    token = match.group(0)
    if token.isdigit() and _follows_account_label(match):
        return token
    return ID_NUMBER_TOKEN


def _redact_account_number(match: re.Match[str]) -> str:
    return f"{match.group(1)} {ACCOUNT_NUMBER_TOKEN}"


EMAIL_RULE = RedactionRule("email", _EMAIL_RE, EMAIL_TOKEN)
URL_RULE = RedactionRule("url", _URL_RE, URL_TOKEN)
CREDIT_CARD_RULE = RedactionRule("credit_card", _CREDIT_CARD_RE, CREDIT_CARD_TOKEN)
CARD_ENDING_RULE = RedactionRule("card_ending", _CARD_ENDING_RE, CARD_ENDING_TOKEN)
PHONE_RULE = RedactionRule("phone", _PHONE_RE, PHONE_TOKEN)
SSN_RULE = RedactionRule("ssn", _SSN_RE, SSN_TOKEN)
PASSPORT_RULE = RedactionRule("passport", _PASSPORT_RE, _redact_id_number)
ACCOUNT_NUMBER_RULE = RedactionRule("account_number", _ACCOUNT_RE, _redact_account_number)

DEFAULT_RULES: tuple[RedactionRule, ...] = (
    EMAIL_RULE,
    URL_RULE,
    CREDIT_CARD_RULE,
    CARD_ENDING_RULE,
    PHONE_RULE,
    SSN_RULE,
    PASSPORT_RULE,
    ACCOUNT_NUMBER_RULE,
)

PLACEHOLDER_TOKENS: tuple[str, ...] = (
    EMAIL_TOKEN,
    URL_TOKEN,
    CREDIT_CARD_TOKEN,
    CARD_ENDING_TOKEN,
    PHONE_TOKEN,
    SSN_TOKEN,
    ID_NUMBER_TOKEN,
    ACCOUNT_NUMBER_TOKEN,
)
