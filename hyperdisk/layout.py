from dash import dcc, html

from .config import DEFAULT_CONFIG
from .sketch import empty_sketch
from .utils.style_config import LAYOUT_STYLES, create_styled_div

CANVAS_SIZE = 800
PAN_RANGE = 500


def _control(label: str, control) -> html.Div:
    return create_styled_div(
        [html.Label(label, style=LAYOUT_STYLES['control_label']), control],
        style_key='control_group',
    )


def _config_panel() -> html.Div:
    return create_styled_div(
        [
            html.H4("Configuration"),
            _control("Projection", dcc.Dropdown(
                id="projection",
                options=[
                    {"label": "Hyperbolic", "value": "hyperbolic"},
                    {"label": "Euclidean", "value": "euclidean"},
                ],
                value="hyperbolic",
                clearable=False,
            )),
            html.H5("Random graph"),
            _control("Nodes", dcc.Input(id="num-nodes", type="number", min=1, max=500, step=1, value=50)),
            _control("Edge probability", dcc.Slider(
                id="edge-probability", min=0, max=0.2, step=0.005, value=0.04,
                marks={0: "0", 0.1: "0.1", 0.2: "0.2"},
                tooltip={"placement": "bottom"},
            )),
            _control("Seed", dcc.Input(id="seed", type="number", step=1, value=0)),
            html.Button("Generate", id="generate-btn", n_clicks=0, style=LAYOUT_STYLES['button_primary']),
            html.H5("Dot file"),
            dcc.Upload(
                id="dot-upload",
                children=html.Div(["Drop or ", html.A("select a .dot file")]),
                style=LAYOUT_STYLES['upload'],
                multiple=False,
            ),
            html.H5("Drawing"),
            _control("Node radius (hyperbolic)", dcc.Slider(
                id="node-radius", min=0.01, max=0.3, step=0.01, value=DEFAULT_CONFIG.node_radius,
                marks={0.05: "0.05", 0.2: "0.2"},
                tooltip={"placement": "bottom"},
            )),
            _control("Edge thickness", dcc.Slider(
                id="edge-thickness", min=0.5, max=5, step=0.5, value=1.5,
                marks={1: "1", 3: "3", 5: "5"},
            )),
            _control("Pan x", dcc.Slider(id="pan-x", min=-PAN_RANGE, max=PAN_RANGE, step=10, value=0,
                                         marks={-PAN_RANGE: str(-PAN_RANGE), 0: "0", PAN_RANGE: str(PAN_RANGE)})),
            _control("Pan y", dcc.Slider(id="pan-y", min=-PAN_RANGE, max=PAN_RANGE, step=10, value=0,
                                         marks={-PAN_RANGE: str(-PAN_RANGE), 0: "0", PAN_RANGE: str(PAN_RANGE)})),
            html.H5("Click"),
            _control("Click mode", dcc.Dropdown(
                id="click-mode",
                options=[
                    {"label": "Select node", "value": "select"},
                    {"label": "Draw circle", "value": "circle"},
                    {"label": "Draw line", "value": "line"},
                ],
                value="select",
                clearable=False,
            )),
            _control("Circle radius (hyperbolic)", dcc.Slider(
                id="draw-radius", min=0.05, max=2, step=0.05, value=0.5,
                marks={0.5: "0.5", 1: "1", 2: "2"},
                tooltip={"placement": "bottom"},
            )),
            html.Button("Clear drawing", id="clear-sketch-btn", n_clicks=0, style=LAYOUT_STYLES['button_primary']),
            dcc.Checklist(
                id="show-centers",
                options=[{"label": " Show marker centres", "value": "centers"}],
                value=[],
            ),
            html.Div(id="status", style=LAYOUT_STYLES['status']),
        ],
        style_key='sidebar',
    )


def _centre_panel() -> html.Div:
    return create_styled_div(
        dcc.Graph(
            id="graph-figure",
            style={"width": f"{CANVAS_SIZE}px", "height": f"{CANVAS_SIZE}px", "margin": "auto"},
            config={
                "displayModeBar": True,
                "displaylogo": False,
                "modeBarButtonsToRemove": ["lasso2d", "select2d"],
                "toImageButtonOptions": {
                    "format": "svg",
                    "filename": "hyperbolic_graph",
                },
            },
        ),
        style_key='canvas',
    )


def make_layout() -> html.Div:
    return create_styled_div(
        [
            create_styled_div(
                html.H2("Hyperbolic Graph Viewer", style=LAYOUT_STYLES['navbar_title']),
                style_key='navbar',
            ),
            dcc.Store(id="graph-store"),
            dcc.Store(id="highlight-store"),
            dcc.Store(id="sketch-store", data=empty_sketch()),
            dcc.Store(id="cursor-store"),
            create_styled_div([_config_panel(), _centre_panel()], style_key='main_content'),
        ],
        style_key='app_container',
    )
