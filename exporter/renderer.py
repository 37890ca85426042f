from collections.abc import Mapping


def format_labels(labels: Mapping[str, str] | None) -> str:
    """Join labels into ``key="value"`` pairs, no escaping applied."""
    if not labels:
        return ""
    return ",".join(f'{key}="{value}"' for key, value in labels.items())


def format_value(
    name: str,
    labels: Mapping[str, str] | None,
    value: str
) -> str:
    """
    Render one line of exposition-format text.

    Parameters
    ----------
    name : str
        Metric name
    labels : Mapping[str, str] | None
        Label set; the label block is omitted when empty
    value : str
        Already formatted sample value

    Returns
    -------
    str
        ``name{labels} value`` terminated by a newline
    """
    result = name
    label_block = format_labels(labels)
    if label_block:
        result += "{" + label_block + "}"
    return f"{result} {value}\n"
