from .gym_env import FiveHorseEnv, render_ascii

__all__ = ["FiveHorseEnv", "render_ascii"]
