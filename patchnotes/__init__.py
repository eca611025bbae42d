"""
Minecraft: Java Edition patch notes, republished as RSS 2.0 or JSON Feed.
"""

__version__ = "1.0.0"
