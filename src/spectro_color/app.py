from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

# Project-local engine
from .catalog import EXAMPLES, example_colors
from .hexrgb import Hex
from .mixing import mix_colors, mix_spectrum, select_palette
from .observed import (
    Mode,
    get_absorbed_color,
    get_observed_color,
    get_observed_color_multi_range,
    observed_for_wavelengths,
    parse_mode,
)
from .ranges import validate_ranges, validate_wavelength, validate_wavelengths
from .spectrum import BANDS, get_color_band, spectrum_bar
from .spin import blend_segments

# ColorAide
from coloraide import Color

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "SPECTRO_SAMPLING_STEP": 2.0,
    "SPECTRO_DEFAULT_MODE": "ideal",
    "SPECTRO_SPECTRUM_WIDTH": 400,
}

MAX_SPECTRUM_WIDTH = 1024


def describe(hex_str: Hex) -> dict[str, str]:
    """Hex plus a CSS string and the label colour that reads best on it."""
    c = Color(hex_str)
    on_black = c.contrast("black")
    on_white = c.contrast("white")
    return {
        "hex": hex_str,
        "css": c.to_string(),
        "text": "#000000" if on_black >= on_white else "#ffffff",
    }


def parse_floats(val: str | None) -> list[float]:
    """'430, 662' → [430.0, 662.0]"""
    out: list[float] = []
    for part in (val or "").split(","):
        part = part.strip()
        if not part:
            continue
        try:
            out.append(float(part))
        except ValueError:
            raise ValueError(f"not a number: '{part}'") from None
    return out


def parse_ranges(val: str | None) -> list[tuple[float, float]]:
    """'425-435,657-667' → [(425.0, 435.0), (657.0, 667.0)]"""
    out: list[tuple[float, float]] = []
    for part in (val or "").split(","):
        part = part.strip()
        if not part:
            continue
        lo, sep, hi = part.partition("-")
        if not sep:
            raise ValueError(f"range must look like min-max, got '{part}'")
        try:
            out.append((float(lo), float(hi)))
        except ValueError:
            raise ValueError(f"range must look like min-max, got '{part}'") from None
    return out


def _mode() -> Mode:
    return parse_mode(
        request.args.get("mode"), current_app.config["SPECTRO_DEFAULT_MODE"]
    )


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env()
    if config:
        app.config.from_mapping(config)
    parse_mode(app.config["SPECTRO_DEFAULT_MODE"])  # fail fast on a bad default

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def internal_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Request failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/bands")
    def bands():
        return jsonify(
            [
                {
                    "name": b.name,
                    "min": b.min,
                    "max": b.max,
                    "absorbed": b.absorbed,
                    "observed": b.observed,
                }
                for b in BANDS
            ]
        )

    @app.route("/color")
    def color():
        raw = request.args.get("wavelength")
        if raw is None:
            return jsonify({"error": "wavelength is required"}), 400
        wl = validate_wavelength(raw)
        mode = _mode()
        return jsonify(
            {
                "wavelength": wl,
                "band": get_color_band(wl),
                "mode": mode,
                "absorbed": describe(get_absorbed_color(wl)),
                "observed": describe(get_observed_color(wl, mode)),
            }
        )

    @app.route("/observed")
    def observed():
        mode = _mode()
        if "wavelengths" in request.args:
            raw = parse_floats(request.args["wavelengths"])
            wls = validate_wavelengths(raw)
            hex_out = observed_for_wavelengths(wls, mode)
        else:
            ranges = validate_ranges(parse_ranges(request.args.get("ranges")))
            hex_out = get_observed_color_multi_range(ranges, mode)
        return jsonify({"mode": mode, "observed": describe(hex_out)})

    @app.route("/mix/spectrum")
    def mix_continuous():
        try:
            step = float(request.args.get("step", app.config["SPECTRO_SAMPLING_STEP"]))
        except ValueError:
            return jsonify({"error": "step must be a number"}), 400
        excluded = parse_ranges(request.args.get("exclude"))
        return jsonify({"color": describe(mix_spectrum(excluded, step=step))})

    @app.route("/mix/disk")
    def mix_disk():
        mode = _mode()
        enabled = select_palette((request.args.get("colors") or "").split(","))
        out = {
            "mode": mode,
            "colors": [e.name for e in enabled],
            "color": describe(mix_colors(enabled, mode)),
        }
        if "blend" in request.args:
            try:
                blend = float(request.args["blend"])
            except ValueError:
                return jsonify({"error": "blend must be a number"}), 400
            out["segments"] = blend_segments(enabled, mode, blend)
        return jsonify(out)

    @app.route("/spectrum")
    def spectrum():
        try:
            default_width = app.config["SPECTRO_SPECTRUM_WIDTH"]
            width = int(request.args.get("width", default_width))
        except ValueError:
            return jsonify({"error": "width must be an integer"}), 400
        width = max(2, min(width, MAX_SPECTRUM_WIDTH))
        return jsonify(spectrum_bar(width))

    @app.route("/examples")
    def examples():
        mode = _mode()
        return jsonify(
            [
                {
                    "name": ex.name,
                    "wavelengths": ex.wavelengths,
                    "description": ex.description,
                    "appears": {"name": ex.appears_color, "hex": ex.appears_hex},
                    **{k: describe(v) for k, v in example_colors(ex, mode).items()},
                }
                for ex in EXAMPLES
            ]
        )

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
