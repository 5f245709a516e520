"""
Global styles and CSS for the holdings UI.
"""
import html

COLORS = {
    "text_primary": "#111827",
    "text_secondary": "#6b7280",
    "highlight_bg": "#fef9c3",
}


def get_global_css() -> str:
    """Return global CSS for account cards and holding rows."""
    return f"""
    <style>
        .account-card-meta {{
            color: {COLORS['text_secondary']};
            font-size: 13px;
            margin-bottom: 8px;
        }}
        
        .holding-cell {{
            display: block;
            padding: 6px 8px;
            border-radius: 4px;
            color: {COLORS['text_primary']};
        }}
        
        .holding-duplicate {{
            background: {COLORS['highlight_bg']};
        }}
    </style>
    """


def holding_cell(text: str, highlighted: bool) -> str:
    """HTML for one cell of a holdings row."""
    css = "holding-cell holding-duplicate" if highlighted else "holding-cell"
    return f'<span class="{css}">{html.escape(text)}</span>'


def inject_styles():
    """Inject global styles into the Streamlit app."""
    import streamlit as st
    st.markdown(get_global_css(), unsafe_allow_html=True)
