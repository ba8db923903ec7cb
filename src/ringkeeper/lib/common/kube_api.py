"""
kube_api.py
- Minimal Kubernetes API client for a single ConfigMap (GET/POST/PUT).
- Authenticates with the pod's service-account bearer token and verifies the
  API server against the service-account CA when present.
- Transport errors are retried with exponential backoff; HTTP statuses are
  handed back to the caller untouched.
"""

import os
import requests
from loguru import logger
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from ringkeeper.core.errors import ConfigMapError

TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)
RETRY_WAIT = wait_exponential(multiplier=1, min=1, max=10)


def read_token(token_file):
    if not os.path.exists(token_file):
        logger.warning(f"[kube_api] Token file {token_file} not found, sending unauthenticated requests.")
        return None
    with open(token_file, "r") as f:
        return f.read().strip()


def api_session(settings):
    """
    Build a requests session carrying the bearer token and JSON headers.
    """
    session = requests.Session()
    session.headers.update({"Accept": "application/json", "Content-Type": "application/json"})
    token = read_token(settings["token_file"])
    if token:
        session.headers["Authorization"] = f"Bearer {token}"
    session.verify = settings["ca_file"] if os.path.exists(settings["ca_file"]) else True
    return session


def configmap_url(settings, collection=False):
    base = f"{settings['api_url']}/api/v1/namespaces/{settings['namespace']}/configmaps"
    return base if collection else f"{base}/{settings['configmap']}"


def _request(settings, session, method, url, **kwargs):
    attempts = max(settings["api_retries"], 1)

    @retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=RETRY_WAIT,
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
    )
    def send():
        logger.debug(f"[kube_api] {method} {url}")
        return session.request(method, url, timeout=settings["api_timeout"], **kwargs)

    try:
        response = send()
    except TRANSIENT_ERRORS as e:
        raise ConfigMapError(f"{method} {url} failed after {attempts} attempt(s): {e}") from e
    except requests.RequestException as e:
        raise ConfigMapError(f"{method} {url} failed: {e}") from e

    logger.debug(f"[kube_api] {method} {url} -> {response.status_code}")
    return response


def response_body(response, what):
    """Decoded JSON body of a successful response; a non-JSON body raises ConfigMapError."""
    try:
        return response.json()
    except ValueError as e:
        raise ConfigMapError(f"{what} returned a non-JSON body: {response.text[:200]}", status=response.status_code) from e


def get_configmap(settings, session=None):
    session = session or api_session(settings)
    return _request(settings, session, "GET", configmap_url(settings))


def create_configmap(settings, body, session=None):
    session = session or api_session(settings)
    return _request(settings, session, "POST", configmap_url(settings, collection=True), json=body)


def replace_configmap(settings, body, session=None):
    session = session or api_session(settings)
    return _request(settings, session, "PUT", configmap_url(settings), json=body)
