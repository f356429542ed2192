"""Flask server exposing board temperatures for Prometheus scraping."""

import logging
from flask import Flask, Response, jsonify, request

from config import Config, ConfigError
from logging_config import configure_logging
from collectors import detect_board, collect_command_temperatures, collect_thermal_zones
from collectors.board import RASPBERRY_PI, TEGRA
from exposition import render

logger = logging.getLogger(__name__)

CONTENT_TYPE = 'text/plain; version=0.0.4'

app = Flask(__name__)
board = 'unknown'


def collect_temperatures() -> list:
    """Read vendor commands first, then thermal zones."""
    temps = []

    try:
        temps.extend(collect_command_temperatures())
    except Exception as e:
        logger.error(f"Error collecting command temperatures: {e}")

    try:
        temps.extend(collect_thermal_zones())
    except Exception as e:
        logger.error(f"Error collecting thermal zones: {e}")

    return temps


@app.route('/metrics')
def metrics():
    """Serve current temperatures in text exposition format."""
    temps = collect_temperatures()
    for temp in temps:
        logger.debug(f"Found temperature: {temp.device}: {temp.temp:f}")

    body = render(temps, Config.VERSION, Config.BUILD_TIME)
    logger.info(f"{request.remote_addr} metrics served successfully")
    return Response(body, content_type=CONTENT_TYPE)


@app.route('/health')
def health_check():
    """Health check endpoint."""
    return jsonify({'status': 'healthy', 'board': board})


def init_app():
    """Load the config file, set up logging and detect the board."""
    global board

    try:
        if Config.load_file():
            logger.info(f"Found config file at {Config.CONFIG_FILE}")
    except ConfigError as e:
        logger.error(str(e))
        raise SystemExit(e.exit_code)

    configure_logging(Config.LOG_LEVEL, Config.LOG_DESTINATION, Config.LOG_FILENAME)
    logger.info(f"Temperature Exporter v{Config.VERSION} (built: {Config.BUILD_TIME})")

    board = detect_board()
    if board == RASPBERRY_PI:
        logger.info("Detected Raspberry Pi")
    elif board == TEGRA:
        logger.info("Detected Tegra based board")
    else:
        logger.warning("Unknown board")

    return board


# Logging before the config file is read
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Initialize on module load, also when imported by a WSGI server
init_app()


def main():
    logger.info(f"Server listening on {Config.HOST}:{Config.PORT}")
    app.run(host=Config.HOST, port=Config.PORT)


if __name__ == '__main__':
    main()
