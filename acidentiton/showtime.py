import os
import sys
from flask import Flask

from acidentiton.log import setup_logging
from acidentiton.api.routes import bp as api_bp

app = Flask(__name__)
app.register_blueprint(api_bp)


def main(argv=None):
    argv = sys.argv if argv is None else argv
    setup_logging()
    port = int(os.getenv("ACIDENTITON_PORT", "5000"))
    if "--port" in argv:
        try:
            i = argv.index("--port")
            port = int(argv[i+1])
        except (IndexError, ValueError):
            print("[Acidentiton] bad --port, using", port)
    print(f"[Acidentiton] running at http://0.0.0.0:{port}")
    app.run(host="0.0.0.0", port=port, debug=False)


if __name__ == "__main__":
    main()
