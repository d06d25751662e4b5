# finboard/web/routes/telegram.py
import sys
import traceback

from flask import jsonify, request

from finboard.core import notifier


async def telegram_forward_route():
    """Recebe {message, secret} e repassa a mensagem para o chat do bot."""
    if not request.is_json:
        print("ERROR: Telegram forward received non-JSON request.", file=sys.stderr)
        return jsonify({"error": "Request must be JSON"}), 400

    data = request.get_json(silent=True) or {}
    if not notifier.is_secret_valid(data.get("secret")):
        return jsonify({"error": "Unauthorized"}), 401

    if not notifier.is_configured():
        return jsonify({"error": "Telegram bot not configured"}), 500

    message = (data.get("message") or "").strip()
    if not message:
        return jsonify({"error": "Message is required"}), 400

    try:
        response_data = await notifier.send_telegram_message(message)
        return jsonify({"success": True, "data": response_data}), 200
    except Exception as e:
        print(f"ERROR: Telegram API Error: {e}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        return jsonify({"error": str(e) or "Failed to send message"}), 500
