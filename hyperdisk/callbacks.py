import base64
import logging
from typing import Optional

import dash
from dash import Input, Output, State, callback_context

from .config import DEFAULT_CONFIG
from .errors import GraphFormatError
from .graph import Graph, erdos_renyi, read_dot
from .layout import CANVAS_SIZE
from .poincare import PoincareDisk, Point
from .render import RenderPass
from .sketch import DRAW_MODES, add_click, build_sketch, empty_sketch
from .visualization import GraphVisualization

logger = logging.getLogger(__name__)


def _decode_upload(contents: str) -> str:
    """Text of a dcc.Upload data URL."""
    _, encoded = contents.split(",", 1)
    return base64.b64decode(encoded).decode("utf-8")


def _clicked(click):
    try:
        pt = click["points"][0]
        return pt["text"]
    except (TypeError, KeyError, IndexError):
        return None


def register_callbacks(app: dash.Dash) -> None:
    @app.callback(
        Output("graph-store", "data"),
        Output("status", "children"),
        Input("generate-btn", "n_clicks"),
        Input("dot-upload", "contents"),
        State("dot-upload", "filename"),
        State("num-nodes", "value"),
        State("edge-probability", "value"),
        State("seed", "value"),
        prevent_initial_call=False,
    )
    def _update_graph_store(n_clicks, contents, filename, num_nodes, probability, seed):
        triggered = [t["prop_id"] for t in callback_context.triggered]
        if "dot-upload.contents" in triggered and contents:
            try:
                graph = read_dot(_decode_upload(contents), width=CANVAS_SIZE, height=CANVAS_SIZE)
            except (GraphFormatError, UnicodeDecodeError, ValueError) as e:
                logger.warning("Could not read %s: %s", filename, e)
                return dash.no_update, f"Could not read {filename}: {e}"
            logger.info("Loaded %s: %d nodes, %d edges", filename, len(graph.nodes), len(graph.edges))
            return graph.to_dict(), f"{filename}: {len(graph.nodes)} nodes, {len(graph.edges)} edges"

        graph = erdos_renyi(
            int(num_nodes or 1), float(probability or 0),
            x_width=CANVAS_SIZE, y_width=CANVAS_SIZE,
            seed=None if seed is None else int(seed),
        )
        logger.info("Generated random graph: %d nodes, %d edges", len(graph.nodes), len(graph.edges))
        return graph.to_dict(), f"Random graph: {len(graph.nodes)} nodes, {len(graph.edges)} edges"

    @app.callback(
        Output("highlight-store", "data"),
        Input("graph-figure", "clickData"),
        State("highlight-store", "data"),
        State("click-mode", "value"),
    )
    def _select(click, current, mode):
        if mode != "select":
            return dash.no_update
        label = _clicked(click)
        if label is None or label == current:
            return None
        return label

    @app.callback(
        Output("sketch-store", "data"),
        Input("graph-figure", "clickData"),
        Input("clear-sketch-btn", "n_clicks"),
        State("click-mode", "value"),
        State("draw-radius", "value"),
        State("projection", "value"),
        State("sketch-store", "data"),
    )
    def _draw(click, n_clear, mode, radius, projection, sketch):
        triggered = [t["prop_id"] for t in callback_context.triggered]
        if "clear-sketch-btn.n_clicks" in triggered:
            return empty_sketch()
        if projection != "hyperbolic":
            return dash.no_update
        return _sketch_after_click(click, mode, radius, sketch)

    @app.callback(
        Output("cursor-store", "data"),
        Input("graph-figure", "hoverData"),
        State("sketch-store", "data"),
        State("click-mode", "value"),
        State("cursor-store", "data"),
    )
    def _track_cursor(hover, sketch, mode, current):
        return _cursor_after_hover(hover, sketch, mode, current)

    @app.callback(
        Output("graph-figure", "figure"),
        Input("graph-store", "data"),
        Input("projection", "value"),
        Input("node-radius", "value"),
        Input("edge-thickness", "value"),
        Input("pan-x", "value"),
        Input("pan-y", "value"),
        Input("show-centers", "value"),
        Input("highlight-store", "data"),
        Input("click-mode", "value"),
        Input("sketch-store", "data"),
        Input("cursor-store", "data"),
    )
    def _render(graph_data, projection, node_radius, edge_thickness, pan_x, pan_y, show_centers,
                highlight, mode, sketch, cursor):
        if not graph_data:
            return dash.no_update
        fig = build_figure(
            Graph.from_dict(graph_data), projection,
            node_radius=node_radius, edge_thickness=edge_thickness,
            offset=(pan_x or 0, pan_y or 0),
            show_centers="centers" in (show_centers or []),
            highlight=highlight, mode=mode, sketch=sketch, cursor=cursor,
        )
        fig.update_layout(uirevision="graph")
        return fig


def _click_point(event) -> Optional[Point]:
    """Canvas position of a plotly click or hover event."""
    try:
        pt = event["points"][0]
        return Point(float(pt["x"]), float(pt["y"]))
    except (TypeError, KeyError, IndexError, ValueError):
        return None


def _disk() -> PoincareDisk:
    return PoincareDisk.from_canvas(CANVAS_SIZE, CANVAS_SIZE)


def _sketch_after_click(click, mode, radius, sketch):
    """New sketch-store data for a click, or no_update when nothing is drawn."""
    point = _click_point(click)
    if mode not in DRAW_MODES or point is None:
        return dash.no_update
    return add_click(sketch, point, mode, float(radius or 0.5), _disk())


def _cursor_after_hover(hover, sketch, mode, current):
    """Cursor position while a line is being drawn, None otherwise."""
    if mode != "line" or not sketch or sketch.get("pending") is None:
        return None if current is not None else dash.no_update
    point = _click_point(hover)
    if point is None:
        return dash.no_update
    return [point.x, point.y]


def build_figure(graph, projection="hyperbolic", node_radius=None, edge_thickness=1.5,
                 offset=(0, 0), show_centers=False, highlight=None, mode="select",
                 sketch=None, cursor=None):
    """
    The viewer figure for a graph and the current controls.

    ``highlight`` is a hover label, as reported by a click on a node.
    Drawn shapes and the click layer only appear in the hyperbolic projection.
    """
    config = DEFAULT_CONFIG.replace(node_radius=float(node_radius or DEFAULT_CONFIG.node_radius))
    render_pass = RenderPass.for_canvas(CANVAS_SIZE, CANVAS_SIZE, config=config, projection=projection)

    # hover labels are strings, node ids may not be
    by_label = {str(n.attrs.get("label", n.id)): n.id for n in graph.nodes}
    result = render_pass.render(graph, offset=offset, highlight=by_label.get(highlight))

    hyperbolic = projection == "hyperbolic"
    drawn = None
    if hyperbolic:
        drawn = build_sketch(sketch, render_pass.disk, config,
                             cursor=None if cursor is None else Point(*cursor))
    return GraphVisualization(result, arc_samples=config.arc_samples, sketch=drawn).create_figure(
        edge_width=edge_thickness,
        show_inversion_centers=show_centers,
        click_layer=hyperbolic and mode in DRAW_MODES,
    )
