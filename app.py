from flask import Flask, jsonify, request

import config
from platforms import get_social
from platforms.base import CardSize, MetadataSnapshot
from services.card import build_card, build_cards
from services.card_size import default_size, dimensions_for

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = config.MAX_REQUEST_BYTES


def _bad_request(message):
    app.logger.warning("Rejected card request: %s", message)
    return jsonify({"success": False, "error": message}), 400


def _read_snapshot(data):
    """Return (snapshot, error_response)."""
    try:
        return MetadataSnapshot.from_dict(data), None
    except ValueError as e:
        return None, _bad_request(str(e))


def _enabled_socials():
    """Enabled socials from config, skipping names that aren't platforms."""
    enabled = []
    for name in config.ENABLED_SOCIALS:
        try:
            enabled.append(get_social(name))
        except ValueError:
            app.logger.warning("Ignoring unknown enabled platform: %s", name)
    return enabled


@app.route("/socials")
def socials():
    enabled = []
    for social in _enabled_socials():
        enabled.append({"name": social.value, "default_size": default_size(social).value})
    return jsonify({"default": config.DEFAULT_SOCIAL, "socials": enabled})


@app.route("/sizes")
def sizes():
    table = {}
    for size in CardSize:
        width, height, icon = dimensions_for(size)
        table[size.value] = {"width": width, "height": height, "icon_size": icon}
    return jsonify(table)


@app.route("/card", methods=["POST"])
def card():
    data = request.get_json(silent=True)
    snapshot, error = _read_snapshot(data)
    if error:
        return error

    name = data.get("social") or config.DEFAULT_SOCIAL
    if not isinstance(name, str):
        return _bad_request("Social must be a string")
    name = name.strip().lower()
    if not config.social_enabled(name):
        return _bad_request(f"Unknown platform: {name}")
    try:
        social = get_social(name)
    except ValueError as e:
        return _bad_request(str(e))

    result = build_card(snapshot, social)
    if not result.success:
        return jsonify(result.to_dict()), 422
    return jsonify(result.to_dict())


@app.route("/cards", methods=["POST"])
def cards():
    data = request.get_json(silent=True)
    snapshot, error = _read_snapshot(data)
    if error:
        return error

    results = build_cards(snapshot, _enabled_socials())
    return jsonify({name: result.to_dict() for name, result in results.items()})


if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT, debug=True)
