"""
Main plot callbacks for the cluster plotter.

Handles the property scatter plot: projecting the selected X/Y/color
properties, fitting the trend line and rendering the figure whenever the
selection changes or the generate button is clicked.
"""

from datetime import datetime

import dash  # type: ignore[import]
import dash_bootstrap_components as dbc  # type: ignore[import]
from dash import Input, Output, html

from cluster_plotter.src.visualization.projection import project, reference_point
from cluster_plotter.src.visualization.trend import fit_trend


class MainPlotCallbacks:
    """Handles scatter plot rendering callbacks"""

    def __init__(self, app, data_loader, trace_creator, figure_manager):
        """
        Initialize main plot callbacks.

        Args:
            app: Dash application instance
            data_loader: DataLoader instance for data operations
            trace_creator: TraceCreator instance for trace creation
            figure_manager: FigureManager instance for figure layout
        """
        self.app = app
        self.data_loader = data_loader
        self.trace_creator = trace_creator
        self.figure_manager = figure_manager

        self.setup_callbacks()

    def setup_callbacks(self):
        """Setup all main plot callbacks"""
        self._setup_scatter_callback()

    def _setup_scatter_callback(self):
        """Setup scatter rendering callback for property selection and generate button"""

        @self.app.callback(
            [
                Output("scatter-plot", "figure"),
                Output("status-info", "children"),
            ],
            [
                Input("x-property-dropdown", "value"),
                Input("y-property-dropdown", "value"),
                Input("color-property-dropdown", "value"),
                Input("generate-button", "n_clicks"),
                Input("reference-switch", "value"),
            ],
            prevent_initial_call=True,
        )
        def update_scatter_plot(x_property, y_property, color_property, n_clicks, show_reference):
            # Incomplete selection keeps the previous plot
            if x_property is None or y_property is None or color_property is None:
                return dash.no_update, dash.no_update

            try:
                fig, projection, trend = self.build_scatter_figure(
                    x_property, y_property, color_property, show_reference=bool(show_reference)
                )
                status = self._create_status_info(projection, trend, "success")
                return fig, status

            except Exception as e:
                return self._create_error_plot(str(e))

    def load_data(self):
        """Load the dataset (cached by the DataLoader)"""
        return self.data_loader.load_data()

    def build_scatter_figure(self, x_property, y_property, color_property, show_reference=False):
        """
        Build the scatter figure for a property selection.

        Returns:
            Tuple (figure, projection, trend); trend is None when no point
            could be projected
        """
        data = self.load_data()

        projection = project(data["entities"], x_property, y_property, color_property)
        trend = None

        if projection.is_empty:
            fig = self.figure_manager.create_empty_figure(
                self.trace_creator.create_empty_scatter_message(projection)
            )
        else:
            trend = fit_trend(projection.xs, projection.ys)

            reference = None
            if show_reference and data.get("galaxy") is not None:
                point = reference_point(data["galaxy"], x_property, y_property)
                if point is not None:
                    reference = (data["galaxy"], point)

            traces = self.trace_creator.create_scatter_traces(projection, trend, reference)
            fig = self.figure_manager.create_scatter_figure(traces, x_property, y_property)

        return fig, projection, trend

    def _create_error_plot(self, error_message):
        """Create error plot and status for exception handling"""
        error_fig = self.figure_manager.create_empty_figure(
            f"Error generating plot: {error_message}", color="red"
        )
        error_status = dbc.Alert(f"Error: {error_message}", color="danger")
        return error_fig, error_status

    def _create_status_info(self, projection, trend, alert_color):
        """Create status information display"""
        if trend is not None:
            fit_text = f"Trend: y = {trend.slope:.4g}·x + {trend.intercept:.4g}"
        else:
            fit_text = "No trend line (no points)"

        if projection.color_range is not None:
            color_text = (
                f"{projection.color_property}: {projection.color_range[0]:.4g} to "
                f"{projection.color_range[1]:.4g}"
            )
        else:
            color_text = f"{projection.color_property}: no values"

        return dbc.Alert([
            html.H6(f"{projection.x_property} vs {projection.y_property}", className="mb-1"),
            html.P(
                f"Plotted {projection.size} clusters | Skipped {projection.skipped} | {color_text}",
                className="mb-1 small",
            ),
            html.P(fit_text, className="mb-1 small"),
            html.Small(f"Rendered at: {datetime.now().strftime('%H:%M:%S')}", className="text-muted"),
        ], color=alert_color)
