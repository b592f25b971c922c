from __future__ import annotations
from dataclasses import asdict
from typing import Any, Dict
import logging

from flask import Flask, Response, jsonify, request

from cam.config.defaults import DEFAULT_ASSUMPTIONS, assumptions_from_mapping
from cam.config.env import configure_logging, get_api_config
from cam.errors import DomainError, IncompleteScore
from cam.exports.writers import to_record, write_cash_flows
from cam.financial.engine import evaluate_financials
from cam.financial.sensitivity import DEFAULT_VARIATION_PCT, evaluate_sensitivity
from cam.scoring.dimensions import DIMENSIONS
from cam.scoring.gate import CM_THRESHOLDS, IRR_THRESHOLDS, CapitalGateInputs, evaluate_gate
from cam.scoring.recommendation import (
    BAND_A_MIN,
    BAND_B_MIN,
    BAND_C_MIN,
    BAND_CONFIG,
    RECOMMENDATION_CONFIG,
    evaluate_score,
)
from cam.scoring.score import partial_weighted_score, scores_from_mapping

logger = logging.getLogger(__name__)

app = Flask(__name__)


class InvalidRequest(Exception):
    pass


@app.errorhandler(DomainError)
def _domain_error(e: DomainError):
    logger.warning("rejected %s %s: %s", request.method, request.path, e)
    return jsonify({'error': 'domain_error', 'message': str(e)}), 400


@app.errorhandler(IncompleteScore)
def _incomplete_score(e: IncompleteScore):
    logger.warning("rejected %s %s: %s", request.method, request.path, e)
    return jsonify({'error': 'incomplete_score', 'missing': list(e.missing)}), 422


@app.errorhandler(InvalidRequest)
def _bad_request(e: InvalidRequest):
    logger.warning("rejected %s %s: %s", request.method, request.path, e)
    return jsonify({'error': 'bad_request', 'message': str(e)}), 400


def _payload() -> Dict[str, Any]:
    if not request.get_data():
        return {}
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        raise InvalidRequest('request body must be valid JSON')
    if not isinstance(payload, dict):
        raise InvalidRequest('request body must be a JSON object')
    return payload


def _gate_from(payload: Dict[str, Any]):
    for key in ('initiative_type', 'revenue_model', 'cm_value'):
        if payload.get(key) is None:
            raise InvalidRequest(f'{key} is required')
    return evaluate_gate(CapitalGateInputs(
        initiative_type=payload['initiative_type'],
        revenue_model=payload['revenue_model'],
        irr_value=payload.get('irr_value'),
        cm_value=payload['cm_value'],
    ))


def _scores_from(payload: Dict[str, Any]):
    raw = payload.get('scores') or {}
    if not isinstance(raw, dict):
        raise InvalidRequest('scores must be an object keyed by dimension')
    return scores_from_mapping(raw)


@app.get('/health')
def health():
    return jsonify({'status': 'ok'})


@app.get('/config')
def get_config():
    return jsonify({
        'default_assumptions': asdict(DEFAULT_ASSUMPTIONS),
        'irr_thresholds': {k: asdict(v) for k, v in IRR_THRESHOLDS.items()},
        'cm_thresholds': {k: asdict(v) for k, v in CM_THRESHOLDS.items()},
        'dimensions': [
            {
                'key': d.key,
                'label': d.label,
                'weight': d.weight,
                'description': d.description,
                'rubric': {str(n): asdict(lvl) for n, lvl in d.rubric.items()},
            }
            for d in DIMENSIONS
        ],
        'bands': {
            'band_a_min': BAND_A_MIN,
            'band_b_min': BAND_B_MIN,
            'band_c_min': BAND_C_MIN,
            'labels': {k: asdict(v) for k, v in BAND_CONFIG.items()},
        },
        'recommendations': {k: asdict(v) for k, v in RECOMMENDATION_CONFIG.items()},
    })


@app.post('/financials')
def post_financials():
    a = assumptions_from_mapping(_payload())
    return jsonify(to_record(evaluate_financials(a)))


@app.route('/financials.csv', methods=['GET', 'POST'])
def financials_csv():
    data = _payload() if request.method == 'POST' else request.args
    a = assumptions_from_mapping(data)
    body = write_cash_flows(evaluate_financials(a), a.discount_rate)
    return Response(body, mimetype='text/csv')


@app.post('/sensitivity')
def post_sensitivity():
    payload = _payload()
    a = assumptions_from_mapping(payload)
    try:
        variation = float(payload.get('variation_pct', DEFAULT_VARIATION_PCT))
    except (TypeError, ValueError):
        raise InvalidRequest('variation_pct must be a number') from None
    return jsonify(to_record(evaluate_sensitivity(a, variation_pct=variation)))


@app.post('/gate')
def post_gate():
    return jsonify(to_record(_gate_from(_payload())))


@app.post('/score')
def post_score():
    payload = _payload()
    gate_payload = payload.get('gate')
    if not isinstance(gate_payload, dict):
        raise InvalidRequest('gate is required')
    gate = _gate_from(gate_payload)
    result = evaluate_score(_scores_from(payload), gate)
    return jsonify(to_record(result))


@app.post('/score/partial')
def post_partial_score():
    provisional = partial_weighted_score(_scores_from(_payload()))
    if provisional is None:
        return jsonify({'status': 'not_started'})
    body = to_record(provisional)
    body['complete'] = provisional.complete
    return jsonify(body)


if __name__ == '__main__':
    configure_logging()
    cfg = get_api_config()
    app.run(host=cfg.host, port=cfg.port)
