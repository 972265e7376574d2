"""Technologies and the subsector that coordinates them."""

from techchoice.technologies.subsector import Subsector
from techchoice.technologies.technology import Technology

__all__ = ["Technology", "Subsector"]
