#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路 HTTP 服务

POST /find-path  计算路径
GET  /           健康检查
"""

import time
from typing import Optional

from flask import Flask, current_app, g, jsonify, request
from loguru import logger
from pydantic import ValidationError

from grid_pathfinder.config.models import AppConfig
from grid_pathfinder.config.loader import default_config
from grid_pathfinder.server.schemas import FindPathPayload
from grid_pathfinder.service.path_planning_service import PathPlanningService, assemble_path

SERVICE_EXTENSION_KEY = "path_planning_service"

INVALID_COORDS_ERROR = "Invalid start or end coordinates"
SERVER_ERROR = "Server error"


def create_app(cfg: Optional[AppConfig] = None) -> Flask:
    """
    创建 Flask 应用

    Args:
        cfg: 服务配置，None 时使用默认配置

    Returns:
        Flask 应用；规划服务挂在 app.extensions["path_planning_service"]
    """
    if cfg is None:
        cfg = default_config()

    app = Flask(__name__)
    app.extensions[SERVICE_EXTENSION_KEY] = PathPlanningService(cfg)

    @app.before_request
    def log_request_start():
        g.request_started = time.perf_counter()
        logger.info(f"{request.method} {_request_target()}")

    @app.after_request
    def finish_response(response):
        # 等价于任意来源的 CORS
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET,HEAD,PUT,PATCH,POST,DELETE"
        response.headers["Access-Control-Allow-Headers"] = request.headers.get(
            "Access-Control-Request-Headers", "Content-Type"
        )

        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000.0 if started is not None else 0.0
        logger.info(f"-> {response.status_code} {request.method} {_request_target()} ({elapsed_ms:.0f}ms)")
        return response

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({"status": 200, "message": "Server is UP and Running"})

    @app.route("/find-path", methods=["POST"])
    def find_path():
        try:
            body = request.get_json(silent=True)
            try:
                payload = FindPathPayload.model_validate(body if body is not None else {})
            except ValidationError as e:
                logger.warning(f"[Server] 请求参数无效: {e.error_count()} 个错误")
                return jsonify({"error": INVALID_COORDS_ERROR}), 400

            service: PathPlanningService = current_app.extensions[SERVICE_EXTENSION_KEY]
            result = service.plan_path(
                payload.start.to_coord(),
                payload.end.to_coord(),
                payload.obstacle_coords(),
            )
            return jsonify({"path": assemble_path(result)})
        except Exception:
            logger.exception("[Server] /find-path 处理异常")
            return jsonify({"error": SERVER_ERROR}), 500

    return app


def _request_target() -> str:
    """路径加查询串；Flask 的 full_path 在无查询串时会带一个多余的 '?'"""
    if request.query_string:
        return request.full_path
    return request.path


def run_server(cfg: AppConfig) -> None:
    """使用 Flask 内置服务器运行（多线程，每个请求独立的规划状态）"""
    app = create_app(cfg)
    logger.info(f"Server listening on http://{cfg.server.host}:{cfg.server.port}")
    app.run(host=cfg.server.host, port=cfg.server.port, threaded=True)
