import os

from flask import Flask, jsonify, render_template_string, request

from memdb.catalog import Catalog
from memdb.exceptions import TableNotFound
from memdb.executor import Executor, Result

INDEX_HTML = """
<!doctype html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">
    <title>memdb console</title>
    <style>body { background:#f8f9fa }</style>
</head>
<body>
<div class="container py-4">
    <div class="card mb-4">
        <div class="card-body">
            <h4 class="card-title">SQL Console</h4>
            <form method="post" action="/execute">
                <div class="mb-3">
                    <textarea name="sql" class="form-control" rows="4">{{ sql }}</textarea>
                </div>
                <button class="btn btn-primary" type="submit">Execute</button>
            </form>
        </div>
    </div>
    {% if res is not none %}
    <div class="card mb-4">
        <div class="card-body">
            {% if not res.ok %}
            <div class="alert alert-danger">{{ res.error.kind }}: {{ res.error }}</div>
            {% elif res.statement == 'SELECT' %}
            <p class="text-muted">{{ res.count }} rows</p>
            <table class="table table-sm table-striped">
                <thead><tr>{% for h in res.columns %}<th>{{ h }}</th>{% endfor %}</tr></thead>
                <tbody>
                {% for r in res.rows %}
                <tr>{% for h in res.columns %}<td>{{ r.get(h) }}</td>{% endfor %}</tr>
                {% endfor %}
                </tbody>
            </table>
            {% else %}
            <div class="alert alert-success">{{ res.statement }} {{ res.table }}: {{ res.count }} row(s)</div>
            {% endif %}
        </div>
    </div>
    {% endif %}
    <h3>Tables</h3>
    <ul class="list-group">
    {% for t in tables %}
        <li class="list-group-item"><a href="/table/{{ t }}">{{ t }}</a></li>
    {% else %}
        <li class="list-group-item text-muted">No tables yet</li>
    {% endfor %}
    </ul>
</div>
</body>
</html>
"""


def create_app(catalog=None):
    """Build the console app around one in-memory catalog.

    Every request shares the catalog, so tables live as long as the app does.
    """
    app = Flask(__name__)
    exe = Executor(catalog if catalog is not None else Catalog())
    app.config["EXECUTOR"] = exe

    def render(res=None, sql="SELECT * FROM student"):
        return render_template_string(INDEX_HTML, res=res, sql=sql, tables=exe.catalog.table_names())

    def bad_request(message):
        return jsonify({"ok": False, "error": message, "kind": "SyntaxError"}), 400

    @app.route("/", methods=["GET"])
    def index():
        return render()

    @app.route("/execute", methods=["POST"])
    def execute():
        sql = request.form.get("sql", "")
        res = exe.try_execute(sql)
        status = 400 if res is not None and not res.ok else 200
        return render(res, sql), status

    @app.route("/table/<table>")
    def show_table(table):
        if not exe.catalog.has_table(table):
            res = Result(statement="SELECT", error=TableNotFound(f"Table not found: {table}"))
            return render(res, ""), 404
        sql = f"SELECT * FROM {exe.catalog.get_table(table).name}"
        res = exe.try_execute(sql)
        status = 400 if not res.ok else 200
        return render(res, sql), status

    @app.route("/api/execute", methods=["POST"])
    def api_execute():
        payload = request.get_json(silent=True)
        if payload is None:
            payload = {"sql": request.form.get("sql", "")}
        if not isinstance(payload, dict):
            return bad_request("request body must be a JSON object")
        sql = payload.get("sql", "")
        if not isinstance(sql, str):
            return bad_request("'sql' must be a string")
        res = exe.try_execute(sql)
        if res is None:
            return bad_request("empty statement")
        if not res.ok:
            return jsonify({"ok": False, "error": str(res.error), "kind": res.error.kind}), 400
        return jsonify({
            "ok": True,
            "statement": res.statement,
            "table": res.table,
            "count": res.count,
            "columns": res.columns,
            "rows": res.records(),
        })

    return app


if __name__ == "__main__":
    create_app().run(port=int(os.environ.get("MEMDB_PORT", "5000")))
