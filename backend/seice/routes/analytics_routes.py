from flask import Blueprint, jsonify

from seice.auth import current_user_id, require_auth
from seice.routes.helpers import server_error
from seice.services.analytics_service import AnalyticsService

analytics_bp = Blueprint('analytics', __name__)


@analytics_bp.route('/dashboard/stats', methods=['GET'])
@require_auth
def dashboard_stats():
    try:
        return jsonify({"success": True, "stats": AnalyticsService.dashboard_stats(current_user_id())})
    except Exception:
        return server_error('Failed to fetch dashboard stats')


@analytics_bp.route('/analytics/grading-stats', methods=['GET'])
@require_auth
def grading_stats():
    try:
        return jsonify({"success": True, "stats": AnalyticsService.grading_stats(current_user_id())})
    except Exception:
        return server_error('Failed to fetch grading analytics')
