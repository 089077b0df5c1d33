"""
Save-to-wallet link generation.
"""

from .save_link import SaveLinkGenerator, SAVE_URL_PREFIX

__all__ = [
    "SaveLinkGenerator",
    "SAVE_URL_PREFIX",
]
