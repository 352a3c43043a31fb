import re

PLACEHOLDER_RX = re.compile(r"\$\{([\w.]+)\}")


def render(template, values):
    """Substitute ${name} placeholders with values[name].

    Placeholders without a matching key are left in place so a template
    written against a larger key set still renders.
    """

    def substitute(match):
        value = values.get(match.group(1))
        return str(value) if value else match.group(0)

    return PLACEHOLDER_RX.sub(substitute, template)


def placeholders(template):
    """Names referenced by a template, in order of first use"""
    seen = []
    for name in PLACEHOLDER_RX.findall(template):
        if name not in seen:
            seen.append(name)
    return seen
