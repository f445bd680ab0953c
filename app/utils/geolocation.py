"""
app/utils/geolocation.py
Géolocalisation best-effort des visiteurs à partir de leur IP.
Un échec ne doit jamais empêcher l'enregistrement d'une visite.
"""
import ipaddress
import logging
from typing import Optional

import httpx
from fastapi import Request

from app.config import settings

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = {"city": None, "country": None}


def normalize_ip(ip: Optional[str]) -> str:
    if not ip:
        return ""
    ip = ip.strip()
    # IPv4 mappée en IPv6
    if ip.lower().startswith("::ffff:"):
        return ip[7:]
    return ip


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        # Le premier de la chaîne est le vrai client
        return normalize_ip(forwarded.split(",")[0])
    return normalize_ip(request.client.host if request.client else "")


def is_private_ip(ip: str) -> bool:
    """Loopback, plages RFC1918 et adresses illisibles : pas de lookup."""
    if not ip or ip == "localhost":
        return True
    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return True
    return addr.is_private or addr.is_loopback


async def fetch_location(ip: str, client: Optional[httpx.AsyncClient] = None) -> dict:
    url = f"{settings.GEOLOCATION_URL.rstrip('/')}/{ip}"
    params = {"fields": "city,country,status"}
    if client is None:
        async with httpx.AsyncClient(timeout=settings.GEOLOCATION_TIMEOUT) as owned:
            resp = await owned.get(url, params=params)
    else:
        resp = await client.get(url, params=params)

    if not resp.is_success:
        logger.warning(f"Geolocation lookup for {ip} returned HTTP {resp.status_code}")
        return dict(UNKNOWN_LOCATION)

    data = resp.json()
    if not isinstance(data, dict) or data.get("status") != "success":
        return dict(UNKNOWN_LOCATION)
    return {"city": data.get("city") or None, "country": data.get("country") or None}


async def get_location_from_ip(ip: str, client: Optional[httpx.AsyncClient] = None) -> dict:
    ip = normalize_ip(ip)
    if is_private_ip(ip):
        return dict(UNKNOWN_LOCATION)
    try:
        return await fetch_location(ip, client)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Geolocation error for {ip}: {e}")
        return dict(UNKNOWN_LOCATION)
