"""Template composition: literal, single-pass placeholder substitution"""

import re


ADR_PLACEHOLDER = '{{ADR_CONTENT}}'
LIST_ADRS_PLACEHOLDER = '{{LIST_ADRS}}'

_PLACEHOLDER_RE = re.compile(f'{re.escape(ADR_PLACEHOLDER)}|{re.escape(LIST_ADRS_PLACEHOLDER)}')


def compose(template: str, adr_html: str, list_adrs: str) -> str:
    """Substitute the document fragment and the index fragment into template.

    Every occurrence of each placeholder is replaced in one pass, so text coming
    from a fragment is never substituted again. A placeholder missing from the
    template drops its fragment.
    """
    values = {ADR_PLACEHOLDER: adr_html, LIST_ADRS_PLACEHOLDER: list_adrs}
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(0)], template)
