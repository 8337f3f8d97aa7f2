"""
Graphics System Module
Renderer needs pygame; import it from graphics.renderer directly.
"""

from .particles import ParticleSystem, Particle

__all__ = ['ParticleSystem', 'Particle']
