from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException
import os
from dotenv import load_dotenv

from yield_model import BASELINE_YIELDS, DEFAULT_BASELINE, build_input, factors, predict
from modules.history import HISTORY_LIMIT, HistoryLog, timestamp_label
from modules.sensitivity import LABELS, profile_vector, sample, sweep
from modules.summary import summarize
from modules.weather import observation_from_dict, parse_observation

# Load environment variables
load_dotenv()

# ---------------- Flask Setup ----------------
app = Flask(__name__)
app.config['SECRET_KEY'] = os.environ.get('SESSION_SECRET', 'yield-estimator-secret-key')
app.config['HISTORY_PREVIEW'] = int(os.environ.get('HISTORY_PREVIEW', 5))

# ---------------- Global History Holder ----------------
_history_log = None


def get_history_log():
    global _history_log
    if _history_log is None:
        _history_log = HistoryLog()
        print("✅ Prediction history initialized")
    return _history_log


def reset_history_log():
    global _history_log
    _history_log = None


# ---------------- Request Parsing ----------------
def read_payload():
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object")
        return payload
    return request.form.to_dict()


def read_weather(payload):
    weather = payload.get('weather')
    if not weather:
        return None
    if not isinstance(weather, dict):
        raise ValueError("weather must be an object")
    # Raw OpenWeather documents carry a 'main' block
    if 'main' in weather:
        return parse_observation(weather)
    return observation_from_dict(weather)


def read_input(payload):
    return build_input(
        crop=payload.get('crop'),
        rainfall=payload.get('rainfall'),
        temp=payload.get('temp'),
        soil=payload.get('soil'),
        fert=payload.get('fert'),
        weather=read_weather(payload),
    )


def input_to_dict(data):
    weather = None
    if data.weather is not None:
        weather = {
            'temp': data.weather.temp,
            'humidity': data.weather.humidity,
            'rain': data.weather.rain,
        }
    return {
        'crop': data.crop,
        'rainfall': data.rainfall,
        'temp': data.temp,
        'soil': data.soil,
        'fert': data.fert,
        'weather': weather,
    }


def bad_request(message):
    return jsonify({'error': message}), 400


@app.errorhandler(HTTPException)
def handle_http_error(exc):
    return jsonify({'error': exc.description}), exc.code


# ---------------- Routes ----------------
@app.route('/health')
def health():
    """Health check endpoint for deployment platforms"""
    return jsonify({"status": "healthy", "service": "YieldEstimator"}), 200


@app.route('/crops')
def crops():
    return jsonify({'baselines': dict(BASELINE_YIELDS), 'default': DEFAULT_BASELINE})


@app.route('/predict', methods=['POST'])
def predict_yield():
    try:
        data = read_input(read_payload())
    except ValueError as e:
        return bad_request(str(e))

    predicted = predict(data)
    date = timestamp_label()
    get_history_log().add(data.crop, predicted, date)

    return jsonify({
        'crop': data.crop,
        'inputs': input_to_dict(data),
        'factors': factors(data),
        'predicted': predicted,
        'summary': summarize(data),
        'date': date,
        'sensitivity': {
            'labels': list(LABELS),
            'rainfall': list(sample(data, 'rainfall')),
            'fertilizer': list(sample(data, 'fertilizer')),
        },
        'profile': {
            'labels': ['Soil', 'Rainfall', 'Temperature', 'Fertilizer'],
            'values': list(profile_vector(data)),
        },
    })


@app.route('/summary', methods=['POST'])
def summary():
    try:
        data = read_input(read_payload())
    except ValueError as e:
        return bad_request(str(e))
    return jsonify({'summary': summarize(data)})


@app.route('/sensitivity/<dimension>', methods=['POST'])
def sensitivity(dimension):
    try:
        data = read_input(read_payload())
        values = sample(data, dimension)
    except ValueError as e:
        return bad_request(str(e))
    return jsonify({'dimension': dimension, 'labels': list(LABELS), 'values': list(values)})


@app.route('/sweep/<dimension>', methods=['POST'])
def sensitivity_sweep(dimension):
    try:
        payload = read_payload()
        data = read_input(payload)
        start = float(payload.get('start', 0))
        stop = float(payload['stop'])
        num = int(payload.get('num', 11))
        points = sweep(data, dimension, start, stop, num)
    except KeyError:
        return bad_request("stop is required")
    except (TypeError, ValueError) as e:
        return bad_request(str(e))
    return jsonify({
        'dimension': dimension,
        'points': [{'value': value, 'predicted': pred} for value, pred in points],
    })


@app.route('/history', methods=['GET'])
def history():
    try:
        limit = int(request.args.get('limit', app.config['HISTORY_PREVIEW']))
    except ValueError:
        return bad_request("limit must be an integer")
    limit = min(limit, HISTORY_LIMIT)
    entries = get_history_log().entries(limit)
    return jsonify({
        'count': len(get_history_log()),
        'entries': [record._asdict() for record in entries],
    })


@app.route('/history', methods=['DELETE'])
def clear_history():
    get_history_log().clear()
    return jsonify({'count': 0, 'entries': []})


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port)
