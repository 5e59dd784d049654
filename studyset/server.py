"""Web server: serves the study page and the JSON API for each mode."""

import http.server
import json
import sys
import threading
import urllib.parse
from importlib.resources import files

from studyset.app import App
from studyset.exam import ExamSession
from studyset.export import EXPORT_FILENAME, export_csv
from studyset.learn import LearnSession
from studyset.match import MatchGame
from studyset.session import ModeSession
from studyset.viewer import ViewerSession


def _load_template(name: str) -> str:
    return files("studyset.templates").joinpath(name).read_text()


class AppHandler(http.server.BaseHTTPRequestHandler):
    app: App = None

    def log_message(self, format, *args):
        pass

    def _send(self, body: bytes, content_type: str, status=200, headers=None):
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        for name, value in (headers or {}).items():
            self.send_header(name, value)
        self.end_headers()
        self.wfile.write(body)

    def _json_response(self, data, status=200):
        self._send(json.dumps(data).encode(), "application/json", status)

    def _error(self, status, msg):
        self._json_response({"error": msg}, status)

    def _read_body(self) -> dict:
        length = int(self.headers.get("Content-Length", 0))
        if length:
            return json.loads(self.rfile.read(length))
        return {}

    def _parse_path(self):
        parsed = urllib.parse.urlparse(self.path)
        return parsed.path, urllib.parse.parse_qs(parsed.query)

    def _require_session(self, mode: str) -> ModeSession | None:
        session = self.app.session
        if session is None or session.mode != mode:
            self._error(409, f"{mode} mode is not active")
            return None
        token = self.headers.get("X-Session-Token")
        if token != session.token:
            self._error(403, "Invalid session token")
            return None
        return session

    # ── GET ──────────────────────────────────────────────────────────

    def do_GET(self):
        path, qs = self._parse_path()

        if path == "/":
            self._send(_load_template("app.html").encode(), "text/html; charset=utf-8")

        elif path == "/api/set":
            fs = self.app.flashcard_set
            self._json_response({"title": fs.title, "count": len(fs), "mode": self.app.mode})

        elif path == "/api/export":
            body = export_csv(self.app.flashcard_set.cards).encode("utf-8")
            self._send(body, "text/csv; charset=utf-8", headers={
                "Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'})

        elif path == "/api/viewer/search":
            session = self._require_session("viewer")
            if not session:
                return
            query = qs.get("q", [""])[0]
            self._json_response({"results": [c.to_dict() for c in session.search(query)]})

        elif path.startswith("/api/") and path.endswith("/state"):
            mode = path.split("/")[2]
            session = self._require_session(mode)
            if not session:
                return
            self._json_response(session.to_dict())

        else:
            self._error(404, "Not found")

    # ── POST ─────────────────────────────────────────────────────────

    def do_POST(self):
        path, _ = self._parse_path()
        try:
            body = self._read_body()
        except (ValueError, UnicodeDecodeError):
            body = None
        if not isinstance(body, dict):
            self._error(400, "Invalid JSON body")
            return

        if path == "/api/mode":
            self._handle_mode(body)
        elif path.startswith("/api/viewer/"):
            self._handle_viewer(path[len("/api/viewer/"):], body)
        elif path.startswith("/api/learn/"):
            self._handle_learn(path[len("/api/learn/"):], body)
        elif path.startswith("/api/match/"):
            self._handle_match(path[len("/api/match/"):], body)
        elif path.startswith("/api/test/"):
            self._handle_test(path[len("/api/test/"):], body)
        else:
            self._error(404, "Not found")

    def _handle_mode(self, body):
        try:
            session = self.app.enter_mode(body.get("mode"))
        except ValueError as e:
            self._error(400, str(e))
            return
        self._json_response({"session_token": session.token, "state": session.to_dict()})

    # ── Mode helpers ─────────────────────────────────────────────────

    def _handle_viewer(self, action, body):
        session: ViewerSession = self._require_session("viewer")
        if not session:
            return
        if action in ("flip", "next", "previous", "shuffle"):
            getattr(session, action)()
        elif action == "search/open":
            session.open_search()
        elif action == "search/close":
            session.close_search()
        elif action == "search/select":
            card_id = body.get("card_id")
            if not isinstance(card_id, int):
                self._error(400, "card_id is required")
                return
            try:
                session.select_result(card_id)
            except KeyError:
                self._error(400, f"Unknown card: {card_id}")
                return
        elif action == "key":
            session.handle_key(str(body.get("key", "")))
        elif action == "swipe":
            try:
                session.swipe(float(body["start_x"]), float(body["end_x"]))
            except (KeyError, TypeError, ValueError):
                self._error(400, "start_x and end_x are required")
                return
        else:
            self._error(404, "Not found")
            return
        self._json_response(session.to_dict())

    def _handle_learn(self, action, body):
        session: LearnSession = self._require_session("learn")
        if not session:
            return
        if action == "select":
            option = body.get("option")
            if not isinstance(option, str):
                self._error(400, "option is required")
                return
            session.select(option)
        elif action == "continue":
            session.continue_()
        elif action == "restart":
            session.restart()
        else:
            self._error(404, "Not found")
            return
        self._json_response(session.to_dict())

    def _handle_match(self, action, body):
        session: MatchGame = self._require_session("match")
        if not session:
            return
        if action == "click":
            tile_id = body.get("tile_id")
            if not isinstance(tile_id, str):
                self._error(400, "tile_id is required")
                return
            try:
                session.click(tile_id)
            except KeyError:
                self._error(400, f"Unknown tile: {tile_id}")
                return
        elif action == "reset":
            session.reset()
        else:
            self._error(404, "Not found")
            return
        self._json_response(session.to_dict())

    def _handle_test(self, action, body):
        session: ExamSession = self._require_session("test")
        if not session:
            return
        if action == "answer":
            card_id = body.get("card_id")
            text = body.get("text", "")
            if not isinstance(card_id, int) or not isinstance(text, str):
                self._error(400, "card_id and text are required")
                return
            try:
                session.set_answer(card_id, text)
            except KeyError:
                self._error(400, f"Unknown card: {card_id}")
                return
        elif action == "submit":
            session.submit()
        elif action == "retake":
            session.retake()
        else:
            self._error(404, "Not found")
            return
        self._json_response(session.to_dict())


def start_server(app: App, settings: dict):
    host = settings.get("host", "127.0.0.1")
    port = settings.get("port", 8787)
    AppHandler.app = app

    server = http.server.HTTPServer((host, port), AppHandler)
    url = f"http://{host}:{port}"
    print(f"studyset running at {url}")
    print(f"Press Ctrl+C to stop")

    if settings.get("open_browser", True):
        try:
            import webbrowser
            threading.Timer(0.5, lambda: webbrowser.open(url)).start()
        except Exception as e:
            print(f"Warning: cannot open browser: {e}", file=sys.stderr)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nServer stopped.")
    finally:
        app.close()
        server.server_close()
