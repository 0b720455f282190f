"""Settings editor for the real-time AI assistant.

Edits the assistant's ``.env`` file and ``personalization.json`` and can
launch the assistant process.
"""

__version__ = "1.0.0"
