"""
JSON buttons: inline keyboard builder with JSON-encoded callback_data
"""

from .keyboard import InlineKeyboardBuilderWithJSON, InlineKeyboardWithJSON, json_button

__all__ = ['InlineKeyboardBuilderWithJSON', 'InlineKeyboardWithJSON', 'json_button']
