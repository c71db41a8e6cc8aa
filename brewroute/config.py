# Configuración de la API BrewRoute
import os

# Puerto del servidor
PORT = int(os.getenv("PORT", "8000"))
HOST = os.getenv("HOST", "0.0.0.0")

# Configuración de logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Configuración de rutas
DEFAULT_MAX_STOPS = 5
MINUTES_PER_MILE = float(os.getenv("BREWROUTE_MINUTES_PER_MILE", "2.0"))  # Estimación lineal de tiempo de manejo
EARTH_RADIUS_MILES = 3959.0

# Configuración de búsqueda de cervecerías
OPENBREWERYDB_URL = os.getenv("OPENBREWERYDB_URL", "https://api.openbrewerydb.org/v1")
SEARCH_PAGE_SIZE = 100
DEFAULT_SEARCH_RADIUS_MILES = 10.0
DEFAULT_SEARCH_LIMIT = 20

# Configuración de geocodificación
GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY")

# Configuración de timeouts (segundos)
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
