"""
Plotly rendering of a render result.
"""
import numpy as np
import plotly.graph_objects as go

from ..poincare.arc import arc_path
from ..sketch import describe_circle
from ..utils.style_config import COLORS, FIGURE_STYLES

CLICK_GRID = 201


class GraphVisualization:
    def __init__(self, result, arc_samples=64, sketch=None):
        """
        Initialize the graph visualization.

        Args:
            result: RenderResult to draw
            arc_samples: Number of polyline points per curved edge
            sketch: Optional Sketch of shapes drawn by clicking
        """
        self.result = result
        self.arc_samples = arc_samples
        self.sketch = sketch

    def create_figure(self, edge_width=1.5, node_stroke_width=1, show_inversion_centers=False,
                      show_grid=True, click_layer=False, width=None, height=None):
        """
        Create a figure of the rendered graph.

        Args:
            edge_width: Stroke width of the edges
            node_stroke_width: Stroke width of the node outlines
            show_inversion_centers: Also mark the hyperbolic and Euclidean
                centre of every node marker
            show_grid: Draw rings at hyperbolic distance 1, 2, 3, ... from
                the origin (hyperbolic projection only)
            click_layer: Cover the disk with a transparent heatmap so that a
                click anywhere reports its position, not only on nodes
            width: Figure width in pixels, defaults to the canvas size
            height: Figure height in pixels

        Returns:
            plotly.graph_objects.Figure: The created figure
        """
        fig = go.Figure()
        disk = self.result.disk
        box = disk.bounding_box

        if self.result.projection == 'hyperbolic':
            fig.add_shape(
                type='circle', xref='x', yref='y', layer='below',
                x0=box.left, y0=box.top, x1=box.right, y1=box.bottom,
                fillcolor=COLORS['disk_fill'], line=dict(width=0),
            )
            self._add_disk_lines(fig, show_grid)
        else:
            fig.add_shape(
                type='rect', xref='x', yref='y', layer='below',
                x0=box.left, y0=box.top, x1=box.right, y1=box.bottom,
                fillcolor=COLORS['canvas_fill'], line=dict(color=COLORS['disk_boundary'], width=1),
            )

        if click_layer:
            self._add_click_layer(fig)
        self._add_edges(fig, edge_width)
        self._add_nodes(fig, node_stroke_width)
        if self.sketch is not None:
            self._add_sketch(fig, edge_width, node_stroke_width)
        if show_inversion_centers:
            self._add_centers(fig)

        pad = disk.radius * 0.05
        layout = FIGURE_STYLES['layout'].copy()
        layout.update({
            'xaxis': {
                'range': [box.left - pad, box.right + pad],
                'showgrid': False,
                'zeroline': False,
                'visible': False,
            },
            # canvas y grows downwards
            'yaxis': {
                'range': [box.bottom + pad, box.top - pad],
                'scaleanchor': 'x',
                'scaleratio': 1,
                'showgrid': False,
                'zeroline': False,
                'visible': False,
            },
            'margin': dict(l=10, r=10, t=10, b=10),
        })
        if width is not None:
            layout['width'] = width
        if height is not None:
            layout['height'] = height

        fig.update_layout(layout)
        return fig

    def _to_canvas(self, x, y):
        disk = self.result.disk
        return x * disk.radius + disk.cx, -y * disk.radius + disk.cy

    def _add_disk_lines(self, fig, show_grid):
        """Boundary circle and equally spaced hyperbolic rings."""
        x, y = self._to_canvas(*self.result.disk.boundary_points())
        fig.add_trace(go.Scatter(
            x=x, y=y,
            mode='lines',
            name='Disk boundary',
            line=dict(color=COLORS['disk_boundary'], width=1),
            showlegend=False,
            hoverinfo='skip'
        ))
        if not show_grid:
            return
        for x, y in self.result.disk.grid_points():
            x, y = self._to_canvas(x, y)
            fig.add_trace(go.Scatter(
                x=x, y=y,
                mode='lines',
                name='Grid',
                line=dict(color=COLORS['grid'], width=1, dash='dot'),
                showlegend=False,
                hoverinfo='skip'
            ))

    def _add_click_layer(self, fig):
        box = self.result.disk.bounding_box
        xs = np.linspace(box.left, box.right, CLICK_GRID)
        ys = np.linspace(box.top, box.bottom, CLICK_GRID)
        fig.add_trace(go.Heatmap(
            x=xs, y=ys,
            z=np.zeros((CLICK_GRID, CLICK_GRID)),
            name='Click layer',
            colorscale=[[0, 'rgba(0,0,0,0)'], [1, 'rgba(0,0,0,0)']],
            showscale=False,
            hoverinfo='none',
        ))

    def _polylines(self, paths, samples):
        xs, ys = [], []
        for path in paths:
            pts = path.sample(samples if not path.is_line else 2)
            xs.extend(pts[:, 0].tolist() + [None])
            ys.extend(pts[:, 1].tolist() + [None])
        return xs, ys

    def _add_edges(self, fig, edge_width):
        """Add all edges as one polyline trace, separated by gaps."""
        xs, ys = self._polylines([e.path for e in self.result.edges], self.arc_samples)
        if not xs:
            return
        fig.add_trace(go.Scatter(
            x=xs, y=ys,
            mode='lines',
            name='Edges',
            line=dict(color=COLORS['edge'], width=edge_width),
            hoverinfo='skip',
            showlegend=False
        ))

    def _add_nodes(self, fig, node_stroke_width):
        """Add node circles as shapes and an invisible hover trace on top."""
        nodes = self.result.nodes
        if not nodes:
            return
        for node in nodes:
            c = node.circle
            lit = node.id == self.result.highlight
            fig.add_shape(
                type='circle', xref='x', yref='y',
                x0=c.cx - c.r, y0=c.cy - c.r, x1=c.cx + c.r, y1=c.cy + c.r,
                fillcolor=node.attrs.get('color', COLORS['node']),
                line=dict(
                    color=COLORS['node_highlight'] if lit else COLORS['node_stroke'],
                    width=node_stroke_width * 2 if lit else node_stroke_width,
                ),
            )

        labels = [str(node.attrs.get('label', node.id)) for node in nodes]
        fig.add_trace(go.Scatter(
            x=[n.circle.cx for n in nodes],
            y=[n.circle.cy for n in nodes],
            mode='markers',
            name='Nodes',
            marker=dict(size=8, opacity=0),
            text=labels,
            customdata=np.array([[n.layout.x, n.layout.y] for n in nodes]),
            hovertemplate='<b>%{text}</b><br>layout: (%{customdata[0]:.1f}, %{customdata[1]:.1f})<extra></extra>',
            showlegend=False
        ))

    def _add_sketch(self, fig, edge_width, node_stroke_width):
        """Drawn circles, drawn geodesics, the pending vertex and the preview line."""
        sketch = self.sketch
        disk = self.result.disk
        for c in sketch.circles:
            fig.add_shape(
                type='circle', xref='x', yref='y',
                x0=c.cx - c.r, y0=c.cy - c.r, x1=c.cx + c.r, y1=c.cy + c.r,
                fillcolor=COLORS['sketch_fill'],
                line=dict(color=COLORS['node_stroke'], width=node_stroke_width),
            )
        if sketch.circles:
            fig.add_trace(go.Scatter(
                x=[c.cx for c in sketch.circles],
                y=[c.cy for c in sketch.circles],
                mode='markers',
                name='Drawn circles',
                marker=dict(size=8, opacity=0),
                hovertext=[describe_circle(c, disk) for c in sketch.circles],
                hoverinfo='text',
                showlegend=False
            ))
            # the two centres the hover text refers to
            fig.add_trace(go.Scatter(
                x=[c.hyperbolic_center.x for c in sketch.circles] + [c.cx for c in sketch.circles],
                y=[c.hyperbolic_center.y for c in sketch.circles] + [c.cy for c in sketch.circles],
                mode='markers',
                name='Drawn circle centres',
                marker=dict(size=3, color=COLORS['inversion_center']),
                hoverinfo='skip',
                showlegend=False
            ))

        if sketch.arcs:
            xs, ys, labels = [], [], []
            for arc, length in zip(sketch.arcs, sketch.lengths):
                x, y = self._polylines([arc_path(arc)], self.arc_samples)
                xs.extend(x)
                ys.extend(y)
                labels.extend([f"length {length:.3f}"] * len(x))
            fig.add_trace(go.Scatter(
                x=xs, y=ys,
                mode='lines',
                name='Drawn lines',
                line=dict(color=COLORS['sketch_line'], width=edge_width),
                text=labels,
                hoverinfo='text',
                showlegend=False
            ))

        if sketch.pending is not None:
            fig.add_trace(go.Scatter(
                x=[sketch.pending.x], y=[sketch.pending.y],
                mode='markers',
                name='Pending vertex',
                marker=dict(size=6, color=COLORS['sketch_line']),
                hoverinfo='skip',
                showlegend=False
            ))
        if sketch.preview is not None:
            xs, ys = self._polylines([arc_path(sketch.preview)], self.arc_samples)
            fig.add_trace(go.Scatter(
                x=xs, y=ys,
                mode='lines',
                name='Preview',
                line=dict(color=COLORS['sketch_line'], width=edge_width, dash='dash'),
                hoverinfo='skip',
                showlegend=False
            ))

    def _add_centers(self, fig):
        """Mark the hyperbolic centre and the Euclidean centre of every marker."""
        nodes = self.result.nodes
        fig.add_trace(go.Scatter(
            x=[n.circle.hyperbolic_center.x for n in nodes],
            y=[n.circle.hyperbolic_center.y for n in nodes],
            mode='markers',
            name='Hyperbolic centres',
            marker=dict(size=4, color=COLORS['inversion_center']),
            hoverinfo='skip',
            showlegend=False
        ))
        fig.add_trace(go.Scatter(
            x=[n.circle.cx for n in nodes],
            y=[n.circle.cy for n in nodes],
            mode='markers',
            name='Euclidean centres',
            marker=dict(size=4, color=COLORS['foreground']),
            hoverinfo='skip',
            showlegend=False
        ))
