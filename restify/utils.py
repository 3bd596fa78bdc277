"""Small string helpers shared by the endpoint builder and the authorizer."""

from typing import Mapping


def clean_component(value: str) -> str:
    """
    Strip a single leading and/or trailing path separator.

    Interior separators are kept, so ``"/a/b/"`` becomes ``"a/b"``.
    """
    if value.startswith('/') and value.endswith('/'):
        return value[1:-1]
    if value.startswith('/'):
        return value[1:]
    if value.endswith('/'):
        return value[:-1]
    return value


def replace_placeholders(template: str, values: Mapping[str, str]) -> str:
    """
    Replace every ``{key}`` token in template with values[key].

    Tokens without a matching key are left as they are.
    """
    for key, value in values.items():
        template = template.replace('{' + key + '}', value)
    return template
