"""Allow ``python -m weather_by_cep`` to start the HTTP server."""

from weather_by_cep.api.main import run

if __name__ == "__main__":
    run()
