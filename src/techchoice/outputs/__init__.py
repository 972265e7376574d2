"""Technology outputs: primary product and by-products."""

from techchoice.outputs.base import Output
from techchoice.outputs.primary import PrimaryOutput
from techchoice.outputs.secondary import SecondaryOutput

__all__ = ["Output", "PrimaryOutput", "SecondaryOutput"]
