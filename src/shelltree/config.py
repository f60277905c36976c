"""
Session configuration for shelltree.
"""

from pydantic import BaseModel, ConfigDict

DEFAULT_PROMPT = "> "
DEFAULT_BANNER = "shelltree"


class ShellConfig(BaseModel):
    """
    Settings of a Shell session.

    Params:
        prompt: Text shown after the formatted path when reading a line
        banner: Text printed once when the read loop starts
        history: Keep typed lines in the line editor history
        builtin_help: Register the global ``help`` (``?``) command
        builtin_quit: Register the global ``quit`` (``exit``) command
        builtin_path: Register the global ``path`` command
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    prompt: str = DEFAULT_PROMPT
    banner: str = DEFAULT_BANNER
    history: bool = True
    builtin_help: bool = True
    builtin_quit: bool = True
    builtin_path: bool = True
