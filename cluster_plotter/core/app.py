"""
Core application module for the cluster plotter.

Contains browser management and server startup functionality.
"""

import getpass
import socket
import threading
import time
import webbrowser


class ClusterVisualizationCore:
    """Core application coordination and browser management"""

    def __init__(self, app):
        """
        Initialize core application.

        Args:
            app: Dash application instance
        """
        self.app = app

    def open_browser(self, port=8050, delay=1.5):
        """Open browser after a short delay"""

        def open_browser_delayed():
            time.sleep(delay)
            webbrowser.open(f"http://localhost:{port}")

        browser_thread = threading.Thread(target=open_browser_delayed)
        browser_thread.daemon = True
        browser_thread.start()

    @staticmethod
    def _hostname():
        try:
            return socket.gethostbyaddr(socket.gethostname())[0]
        except OSError:
            return "remotehost"

    def run(self, host="localhost", port=8050, debug=False, auto_open=True, external_access=False):
        """Run the Dash app"""
        # External access binds to all interfaces and never opens a browser
        if external_access:
            host = "0.0.0.0"
            auto_open = False

        if auto_open:
            self.open_browser(port)

        print("=== Globular Cluster Plotter ===")
        print(f"Server starting on: http://{host}:{port}")
        print("")
        if external_access:
            print("📌 REMOTE ACCESS:")
            print("   If accessing through SSH, forward the port first:")
            print(f"   ssh -L {port}:localhost:{port} {getpass.getuser()}@{self._hostname()}")
            print(f"   Then open: http://localhost:{port}")
            print("")
        print("Press Ctrl+C to stop the server")
        print("")

        self.app.run(
            host=host,
            port=port,
            debug=debug,
            dev_tools_hot_reload=False,
            dev_tools_ui=False,
            dev_tools_props_check=False,
        )

    def try_multiple_ports(self, ports=(8050, 8051, 8052), **kwargs):
        """Try to run on multiple ports if default is busy"""
        for port in ports:
            try:
                self.run(port=port, **kwargs)
                break
            except OSError as e:
                if "Address already in use" in str(e):
                    print(f"Port {port} is busy, trying next port...")
                    continue
                raise
