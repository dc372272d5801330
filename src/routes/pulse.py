# src/routes/pulse.py
"""
Token Pulse Routes
------------------
GET /api/pulse?token=<address>
GET /api/pulse?tokens=<address>,<address>,...
    &format=full (default) | summary
"""

import logging

from flask import Blueprint, Response, jsonify, request

from src.config import settings
from src.errors import ValidationError
from src.services.pulse import get_batch_pulse, get_pulse
from src.services.pulse_format import FORMAT_FULL, render_response

logger = logging.getLogger(__name__)

pulse_bp = Blueprint("pulse_bp", __name__)

USAGE = "GET /api/pulse?token=0x... or GET /api/pulse?tokens=0x...,0x..."
EXAMPLE = "/api/pulse?token=0x4dc5f49fc95427b984f27db843755787589314c0"


def pulse_headers():
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Cache-Control": f"public, max-age={settings.PULSE_CACHE_SECONDS}",
    }


def parse_addresses(token: str | None, tokens: str | None, max_tokens: int | None = None) -> list[str]:
    """`token` wins over `tokens`. Raises ValidationError for an empty or oversized list."""
    limit = max_tokens or settings.PULSE_MAX_TOKENS
    if token:
        addresses = [token]
    elif tokens:
        addresses = [t.strip() for t in tokens.split(",") if t.strip()]
    else:
        addresses = []

    if not addresses:
        raise ValidationError({
            "error": "Missing token address",
            "usage": USAGE,
            "example": EXAMPLE,
        })
    if len(addresses) > limit:
        raise ValidationError({
            "error": "Too many tokens",
            "message": f"Maximum {limit} tokens per request",
        })
    return addresses


@pulse_bp.route("/pulse", methods=["GET", "OPTIONS"])
def token_pulse():
    headers = pulse_headers()
    if request.method == "OPTIONS":
        return Response("", headers=headers)

    try:
        addresses = parse_addresses(request.args.get("token"), request.args.get("tokens"))
        fmt = request.args.get("format") or FORMAT_FULL

        if len(addresses) == 1:
            results = [get_pulse(addresses[0])]
        else:
            results = get_batch_pulse(addresses)

        return jsonify(render_response(results, fmt)), 200, headers
    except ValidationError as e:
        return jsonify(e.payload), e.status_code, headers
    except Exception as e:
        logger.exception("pulse request failed")
        return jsonify({"error": "Internal error", "message": str(e)}), 500, headers
