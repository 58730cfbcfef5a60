"""Style management for interactive prompts"""

from typing import Any

from InquirerPy import get_style


class StyleManager:
    """Builds the InquirerPy style from a small palette"""

    COLORS = {
        "accent": "#00afaf",
        "muted": "#858585",
        "answer": "#5fafff",
        "text": "#ffffff",
    }

    STYLES = {
        "questionmark": {"foreground": "accent", "bold": True},
        "pointer": {"foreground": "accent", "bold": True},
        "answer": {"foreground": "answer"},
        "question": {"foreground": "text"},
        "checkbox": {"foreground": "accent"},
        "disabled": {"foreground": "muted", "italic": True},
    }

    POINTER = "→"
    QMARK = "?"

    def get_inquirer_style(self):
        """Get InquirerPy style configuration"""
        style_dict = {}
        for key, style in self.STYLES.items():
            style_str = self._build_style_string(style)
            if style_str:
                style_dict[key] = style_str
        return get_style(style_dict, style_override=True)

    def _build_style_string(self, style: dict[str, Any]) -> str:
        """Build prompt_toolkit style string, e.g. 'fg:#00afaf bold'"""
        parts = []

        color = self.COLORS.get(style.get("foreground", ""))
        if color:
            parts.append(f"fg:{color}")

        for flag in ("bold", "italic", "underline"):
            if style.get(flag):
                parts.append(flag)

        return " ".join(parts)
