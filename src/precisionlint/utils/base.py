"""
Base utilities shared by the frontend
"""

from typing import Any, Dict


def extract_location_info(meta: Any) -> Dict[str, Any]:
    """Simple location extraction from a Lark meta object (empty rules carry none)"""
    result = {
        'has_location': False,
        'line': 0,
        'column': 0,
        'start_pos': 0,
        'end_pos': 0,
        'end_line': 0,
        'end_column': 0,
    }

    if meta is None or getattr(meta, 'empty', False):
        return result

    if hasattr(meta, 'line') and hasattr(meta, 'column'):
        result.update({
            'has_location': True,
            'line': meta.line or 0,
            'column': meta.column or 0,
            'start_pos': getattr(meta, 'start_pos', 0),
            'end_pos': getattr(meta, 'end_pos', 0),
            'end_line': getattr(meta, 'end_line', 0),
            'end_column': getattr(meta, 'end_column', 0),
        })

    return result
