#ui/shared/text.py
import html

# Characters Streamlit markdown would otherwise treat as formatting ("$" opens LaTeX).
_MD_SPECIAL = ("\\", "$", "*", "_", "`", "#", "~")


def md_escape(text: str) -> str:
    out = str(text)
    for ch in _MD_SPECIAL:
        out = out.replace(ch, "\\" + ch)
    return out


def html_text(text: str) -> str:
    """Escape text for inline HTML blocks rendered through st.markdown."""
    return html.escape(str(text), quote=False).replace("$", "&#36;")


def html_attr(text: str) -> str:
    """Escape text for a double-quoted HTML attribute value."""
    return html.escape(str(text), quote=True)
