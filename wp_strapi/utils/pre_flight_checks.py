import requests

from wp_strapi.migrators.strapi_migrator import strapi_headers


class PreFlightCheckError(Exception):
    """Custom exception for pre-flight check failures."""
    pass


def run_pre_flight_checks(config: dict, session=None):
    """
    Verifies that both ends of the migration are reachable before any
    record is written.

    Args:
        config: The application configuration dictionary.
        session: Optional ``requests.Session``-like object.

    Raises:
        PreFlightCheckError: If any check fails.
    """
    print("[INFO] Running pre-flight checks...")
    http = session or requests

    wp_url = config.get("wordpress", {}).get("api_url", "")
    strapi_cfg = config.get("strapi", {})
    strapi_url = strapi_cfg.get("api_url", "")

    if not wp_url:
        raise PreFlightCheckError("WordPress API URL is not configured.")
    if not strapi_url:
        raise PreFlightCheckError("Strapi API URL is not configured.")

    # Check 1: WordPress REST API answers
    try:
        response = http.get(f"{wp_url.rstrip('/')}/categories", params={"per_page": 1}, timeout=10)
        response.raise_for_status()
    except requests.HTTPError as e:
        raise PreFlightCheckError(f"Unexpected response from the WordPress API: {e}")
    except requests.RequestException as e:
        raise PreFlightCheckError(f"Network error reaching the WordPress API: {e}")

    # Check 2: Strapi is reachable and does not reject the token.  Any other
    # status is fine here; write permissions are only known once we POST.
    try:
        response = http.get(f"{strapi_url.rstrip('/')}/categories", headers=strapi_headers(strapi_cfg), timeout=10)
    except requests.RequestException as e:
        raise PreFlightCheckError(f"Network error reaching Strapi: {e}")
    if response.status_code == 401:
        raise PreFlightCheckError("The configured STRAPI_TOKEN is invalid or expired.")
    if response.status_code >= 500:
        raise PreFlightCheckError(f"Strapi returned {response.status_code}; is it running?")

    print("[INFO] Pre-flight checks passed successfully.")
