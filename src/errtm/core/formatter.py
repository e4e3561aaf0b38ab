"""
Rendering of an effective descriptor into message text.

Shapes produced (brackets mark optional parts):

    error [<state> | in] [<provider>] [<resource>] [(<id>)][: <cause>]
    error setting (attribute `<attr>` | an attribute) in [<provider>] [<resource>] [(<id>)][: <cause>]

The second shape is used whenever an attribute is named or the state is
Setting; an attribute without a state implies Setting.
"""

from errtm import constants as CONSTANTS
from errtm.logger import logger
from .descriptor import Descriptor, ErrorState


def _attribute_phrase(attribute: str) -> str:
    if attribute:
        return f"attribute `{attribute}`"
    return CONSTANTS.ANONYMOUS_ATTRIBUTE_PHRASE


def format_message(descriptor: Descriptor) -> str:
    """
    Render descriptor as a single line of text. Never raises and never
    mutates descriptor.

    Example:
        >>> format_message(Descriptor(provider_name="TFProvider", resource_name="VM",
        ...                           id="i-1", state=Creating, cause="timeout"))
        'error creating TFProvider VM (i-1): timeout'
    """
    state = descriptor.state

    # provider, resource and id words, kept apart so the attribute clause
    # can be placed in front of them
    clause = []
    if descriptor.provider_name:
        clause.append(descriptor.provider_name)
    if descriptor.resource_name:
        clause.append(descriptor.resource_name)
    if descriptor.id:
        clause.append(f"({descriptor.id})")

    words = [CONSTANTS.LEADING_WORD]
    if descriptor.attribute or state == ErrorState.SETTING:
        if state is None:
            state = ErrorState.SETTING
        words += [state.word, _attribute_phrase(descriptor.attribute), CONSTANTS.LOCATION_WORD]
    elif state is not None:
        words.append(state.word)
    elif descriptor.provider_name or descriptor.resource_name:
        words.append(CONSTANTS.LOCATION_WORD)
    words += clause

    logger.debug(f"words: {words!r}")
    message = " ".join(words)

    if descriptor.cause:
        message = f"{message}: {descriptor.cause}"

    return message
