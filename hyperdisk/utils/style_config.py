"""
Colours and inline styles of the hyperbolic graph viewer.
"""
from dash import html

COLORS = {
    # Page
    'background': '#ffffff',
    'background_secondary': '#f8fafc',
    'foreground': '#0f172a',
    'foreground_muted': '#64748b',
    'border': '#e2e8f0',
    'accent': '#3b82f6',
    'accent_foreground': '#ffffff',

    # Drawing
    'disk_fill': '#d3d3d3',
    'disk_boundary': '#000000',
    'canvas_fill': '#d3d3d3',
    'grid': '#bfc5cc',
    'edge': '#000000',
    'node': '#69b3a2',
    'node_stroke': '#000000',
    'node_highlight': '#daa520',
    'sketch_fill': '#add8e6',
    'sketch_line': '#1e3a8a',
    'inversion_center': '#ef4444',
}

LAYOUT_STYLES = {
    'app_container': {
        'backgroundColor': COLORS['background'],
        'minHeight': '100vh',
        'fontFamily': '"Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif',
        'color': COLORS['foreground'],
        'display': 'flex',
        'flexDirection': 'column',
    },
    'navbar': {
        'borderBottom': f"1px solid {COLORS['border']}",
        'padding': '0 24px',
        'height': '64px',
        'display': 'flex',
        'alignItems': 'center',
    },
    'navbar_title': {
        'fontSize': '20px',
        'fontWeight': '600',
        'margin': '0',
    },
    'main_content': {
        'display': 'flex',
        'flex': '1',
    },
    'sidebar': {
        'width': '300px',
        'padding': '24px',
        'borderRight': f"1px solid {COLORS['border']}",
        'overflowY': 'auto',
    },
    'canvas': {
        'flex': '1',
        'padding': '24px',
        'backgroundColor': COLORS['background_secondary'],
    },
    'control_group': {
        'marginBottom': '20px',
    },
    'control_label': {
        'fontSize': '14px',
        'fontWeight': '500',
        'marginBottom': '8px',
        'display': 'block',
    },
    'status': {
        'fontSize': '12px',
        'color': COLORS['foreground_muted'],
        'marginTop': '12px',
    },
    'button_primary': {
        'backgroundColor': COLORS['accent'],
        'color': COLORS['accent_foreground'],
        'border': 'none',
        'borderRadius': '6px',
        'padding': '10px 16px',
        'fontSize': '14px',
        'fontWeight': '500',
        'cursor': 'pointer',
        'width': '100%',
        'marginBottom': '20px',
    },
    'upload': {
        'border': f"1px dashed {COLORS['border']}",
        'borderRadius': '6px',
        'padding': '12px',
        'textAlign': 'center',
        'cursor': 'pointer',
        'fontSize': '13px',
    },
}

FIGURE_STYLES = {
    'layout': {
        'plot_bgcolor': 'rgba(0,0,0,0)',
        'paper_bgcolor': 'rgba(0,0,0,0)',
        'font': {
            'family': '"Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif',
            'color': COLORS['foreground'],
            'size': 12
        },
        'showlegend': False,
        'hovermode': 'closest',
        'dragmode': 'pan',
    }
}


def create_styled_div(children, style_key=None, style=None, **kwargs):
    """
    Wrap viewer components in a div.

    Args:
        children: Components placed in the div
        style_key: Name of a LAYOUT_STYLES entry
        style: Explicit style dict, takes precedence over ``style_key``
        **kwargs: Passed on to ``html.Div`` (id, className, ...)
    """
    if style is None and style_key is not None:
        style = LAYOUT_STYLES[style_key]
    if style is None:
        return html.Div(children, **kwargs)
    return html.Div(children, style=style, **kwargs)
