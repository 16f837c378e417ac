"""HTTP API of the order service and the command that serves it."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from flask import Flask, Response, jsonify, request

from ordersvc.db import establish_connection
from ordersvc.identifiers import CustomerId, OrderId
from ordersvc.messages import CreateOrderRequest, OrderResponse
from ordersvc.mysql_repository import MysqlOrderRepository
from ordersvc.service import OrderService, OrderServiceError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def create_app(service: OrderService) -> Flask:
    """Build the web application serving ``service``."""
    app = Flask(__name__)
    app.extensions["order_service"] = service

    @app.post("/orders")
    def create_order():
        try:
            body = CreateOrderRequest.from_json(request.get_json(silent=True))
        except ValueError as exc:
            return jsonify(str(exc)), 400
        try:
            order = service.create_order(CustomerId(body.customer_id))
        except OrderServiceError as exc:
            return jsonify(str(exc)), 500
        return jsonify(OrderResponse.from_order(order).to_json()), 201

    @app.get("/orders/<order_id>")
    def get_order(order_id: str):
        try:
            order = service.get_order(OrderId(order_id))
        except OrderServiceError as exc:
            return jsonify(str(exc)), 500
        if order is None:
            return Response(status=404)
        return jsonify(OrderResponse.from_order(order).to_json()), 200

    return app


def _load_dotenv(path: Path) -> None:
    """Set variables from a ``.env`` file without overriding existing ones."""
    if not path.is_file():
        return
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, sep, value = line.partition("=")
        if not sep:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        os.environ.setdefault(key.strip(), value)


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the order API backed by the database in ``DATABASE_URL``."""
    parser = argparse.ArgumentParser(description="Serve the order API.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    _load_dotenv(Path(".env"))
    logging.basicConfig(level=logging.INFO)

    database_url = os.environ.get("DATABASE_URL")
    if not database_url:
        raise SystemExit("DATABASE_URL must be set")

    pool = establish_connection(database_url)
    try:
        service = OrderService(MysqlOrderRepository(pool))
        app = create_app(service)
        logger.info("Starting Order Service on %s:%d", args.host, args.port)
        app.run(host=args.host, port=args.port, threaded=True)
    finally:
        pool.close()