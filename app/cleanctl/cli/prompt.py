"""Interactive yes/no prompting.

The cleanup engine receives this as an injected capability and never
reads the console itself.
"""

import typer


def confirm(question: str) -> bool:
    """Ask a yes/no question, defaulting to yes.

    Accepts y/yes and n/no in any case, so full words are understood
    as well as single letters; an empty answer means yes and
    anything else asks again. A closed input stream counts as no.

    Args:
        question: Question to display.

    Returns:
        True if the user agreed.
    """
    try:
        return typer.confirm(question, default=True)
    except typer.Abort:
        return False
