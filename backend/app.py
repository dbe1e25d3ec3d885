# backend/app.py
import io
import os
import zipfile
from flask import Flask, request, jsonify, send_file

from .build_utils import new_task, logo_path, run_icon_task, read_status, task_res_dir

app = Flask(__name__)

# =========================
# Index
# =========================
@app.route("/")
def index():
    return "<h2>Launcher Icon Builder Backend</h2>"

# =========================
# Create an icon task
# =========================
@app.route("/api/icons", methods=["POST"])
def api_icons():
    api_key = request.headers.get("X-API-Key")
    required_key = os.environ.get("API_KEY")

    if required_key and api_key != required_key:
        return jsonify({"error": "Invalid API Key"}), 401

    upload = request.files.get("logo")
    data = request.get_json(silent=True) or {}
    logo_url = data.get("logo_url")

    if upload is None and not logo_url:
        return jsonify({"error": "Missing field: logo or logo_url"}), 400

    task_id = new_task()
    if upload is not None:
        upload.save(logo_path(task_id))
        logo_url = None

    status = run_icon_task(task_id, logo_url)

    code = 201 if status["status"] == "done" else 500
    return jsonify({
        "task_id": task_id,
        "status": status["status"]
    }), code

# =========================
# Task status
# =========================
@app.route("/api/status/<uuid:task_id>", methods=["GET"])
def api_status(task_id):
    status = read_status(str(task_id))
    if status is None:
        return jsonify({"error": "task not found"}), 404
    return jsonify(status)

# =========================
# Download res/ as a zip
# =========================
@app.route("/api/download/<uuid:task_id>", methods=["GET"])
def api_download(task_id):
    res_dir = task_res_dir(str(task_id))
    if not os.path.isdir(res_dir):
        return jsonify({"error": "task has no output"}), 404

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for root, dirs, files in os.walk(res_dir):
            dirs.sort()
            for fname in sorted(files):
                p = os.path.join(root, fname)
                zf.write(p, os.path.join("res", os.path.relpath(p, res_dir)))
    buf.seek(0)

    return send_file(buf, mimetype="application/zip",
                     as_attachment=True, download_name=f"{task_id}-res.zip")

# =========================
# Local debug entry
# =========================
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 10000)))
