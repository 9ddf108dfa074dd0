"""
UI callbacks for the cluster plotter
"""

import os
import tempfile
from datetime import datetime

from dash import Input, Output, State, dcc, no_update


class UICallbacks:
    """Handles UI-related callbacks"""

    def __init__(self, app, config=None, figure_manager=None):
        """
        Initialize UI callbacks.

        Args:
            app: Dash application instance
            config: Configuration object (optional, provides the export directory)
            figure_manager: FigureManager instance used for SVG export
        """
        self.app = app
        self.config = config
        self.figure_manager = figure_manager
        self.setup_callbacks()

    def setup_callbacks(self):
        """Setup all UI-related callbacks"""
        self._setup_button_text_callbacks()
        self._setup_export_callback()

    def _setup_button_text_callbacks(self):
        """Setup callbacks to update button text based on click counts"""

        @self.app.callback(
            Output("generate-button", "children"),
            [Input("generate-button", "n_clicks")],
            prevent_initial_call=False,
        )
        def update_generate_button_text(n_clicks):
            """Update generate button text"""
            return self.generate_button_text(n_clicks)

        @self.app.callback(
            Output("export-button", "children"),
            [Input("export-button", "n_clicks")],
            prevent_initial_call=False,
        )
        def update_export_button_text(n_clicks):
            """Update export button text"""
            if not n_clicks:
                return "💾 Export Plot (SVG)"
            return f"💾 Export Plot (SVG) ({n_clicks})"

    @staticmethod
    def generate_button_text(n_clicks):
        if n_clicks is None:
            n_clicks = 0
        return "📈 Generate Plot" if n_clicks == 0 else f"✅ Plot Generated ({n_clicks})"

    def _setup_export_callback(self):
        """Setup SVG export of the scatter plot"""

        @self.app.callback(
            Output("export-download", "data"),
            [Input("export-button", "n_clicks")],
            [State("scatter-plot", "figure")],
            prevent_initial_call=True,
        )
        def export_scatter_plot(n_clicks, figure):
            if not n_clicks or not figure or not figure.get("data"):
                print("⚠️  Nothing to export: generate a plot first")
                return no_update

            try:
                path = self.export_figure(figure)
            except Exception as e:
                print(f"❌ Error exporting plot: {e}")
                return no_update

            return dcc.send_file(path)

    def export_path(self, filename):
        """Resolve where an exported file is written"""
        if self.config is not None:
            return self.config.get_export_path(filename)
        return os.path.join(tempfile.gettempdir(), filename)

    def export_figure(self, figure):
        """
        Write the figure as SVG to the export directory.

        Returns:
            Path of the written file
        """
        filename = f"cluster_scatter_{datetime.now().strftime('%Y%m%d_%H%M%S')}.svg"
        path = self.figure_manager.export_svg(figure, self.export_path(filename))
        return path
