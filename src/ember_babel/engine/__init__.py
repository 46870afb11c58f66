"""
Transform Engine Adapters.

Bundled adapters:
- ``NodeBabelEngine``: runs Babel in a Node.js subprocess.
"""

from ember_babel.engine.base import TransformEngine, TransformError
from ember_babel.engine.node import NodeBabelEngine

__all__ = ["NodeBabelEngine", "TransformEngine", "TransformError"]
