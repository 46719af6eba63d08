import argparse
import logging
from pathlib import Path
from typing import Optional

# Import configuration management
import sys
sys.path.append(str(Path(__file__).parent.parent))
from config_manager import ConfigManager

from flask import Flask, jsonify, redirect, url_for
from werkzeug.middleware.proxy_fix import ProxyFix

from analytics_service.logging_config import setup_logging
from app.visit_tracking.factory import create_visit_tracking_module
from app.visitor_stats.factory import create_visitor_stats_module

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.parent


def create_app(config_manager: Optional[ConfigManager] = None, data_dir: Optional[Path] = None) -> Flask:
    """Build the Flask application.

    Args:
        config_manager: Configuration source (loads web_app_config.json when None)
        data_dir: Overrides the configured data directory

    Returns:
        Configured Flask application
    """
    config_manager = config_manager or ConfigManager()
    paths_config = config_manager.get_paths_config()
    stats_config = config_manager.get_stats_config()

    # Set up directories
    if data_dir is None:
        data_dir = BASE_DIR / paths_config.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)

    app = Flask(__name__, template_folder='../ui', static_folder='../ui')
    app.wsgi_app = ProxyFix(
            app.wsgi_app,
            x_for   = 1,     # trust 1 hop for X-Forwarded-For
            x_proto = 1,     # trust 1 hop for X-Forwarded-Proto
            x_host  = 1,     # trust 1 hop for X-Forwarded-Host
            x_prefix= 1)     # trust 1 hop for X-Forwarded-Prefix

    # -------------------------------------------------------------------------
    # Modules
    # -------------------------------------------------------------------------

    visit_tracking_module = create_visit_tracking_module(data_dir / stats_config.store_file)

    visitor_stats_module = create_visitor_stats_module(
        record_store=visit_tracking_module["store"],
        tz=stats_config.get_tzinfo(),
        default_period=stats_config.default_period
    )

    app.register_blueprint(visit_tracking_module["blueprint"])
    app.register_blueprint(visitor_stats_module["blueprint"])

    app.extensions["visit_tracking"] = visit_tracking_module
    app.extensions["visitor_stats"] = visitor_stats_module

    # -------------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------------

    @app.get("/")
    def index():
        """Send visitors of the bare host to the dashboard."""
        return redirect(url_for('visitor_stats.stats_dashboard'))

    @app.get("/actuator/health")
    def actuator_health():
        """Health check endpoint for monitoring tools and cloud platforms."""
        return jsonify({
            "status": "UP",
            "service": "visit-analytics"
        }), 200

    logger.info("Visit records stored in %s", (data_dir / stats_config.store_file).resolve())
    return app


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    # Parse command line arguments
    parser = argparse.ArgumentParser(description="Flask application for visitor statistics")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    config_manager = ConfigManager()
    app_config = config_manager.get_app_config()

    # Override configuration with command line arguments
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    setup_logging(app_config.debug)
    app = create_app(config_manager)

    print(f"📋 Configuration loaded:")
    print(f"   - Default period: {config_manager.get_stats_config().default_period}")
    print(f"   - Timezone: {config_manager.get_stats_config().timezone or 'server local'}")
    print(f"   - Server: {app_config.host}:{app_config.port}")
    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )
