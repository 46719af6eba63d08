#!/usr/bin/env python3
"""
Simple runner script for the Flask application.
This script ensures the correct Python path is set and runs the app.
"""

import sys
from pathlib import Path

# Add the current directory to Python path
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from analytics_service.logging_config import setup_logging
from app.main import create_app
from config_manager import ConfigManager

if __name__ == "__main__":
    print("🚀 Starting Flask application...")
    print(f"📁 Working directory: {current_dir}")

    # Import configuration
    config_manager = ConfigManager()
    app_config = config_manager.get_app_config()

    setup_logging(app_config.debug)
    app = create_app(config_manager)

    # Run the Flask app
    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )
