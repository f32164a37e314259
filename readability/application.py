from cachelib import FileSystemCache
from flask import Flask, redirect, render_template, request, session
from flask_session import Session
from tempfile import mkdtemp
from werkzeug.exceptions import default_exceptions, HTTPException, InternalServerError

from readability.helpers import apology, per_hundred
from readability.readability import analyze

# Configure application
app = Flask(__name__)

# Ensure templates are auto-reloaded
app.config["TEMPLATES_AUTO_RELOAD"] = True

# Number of analyses remembered per session
app.config["HISTORY_LIMIT"] = 10


# Ensure responses aren't cached
@app.after_request
def after_request(response):
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    response.headers["Expires"] = 0
    response.headers["Pragma"] = "no-cache"
    return response


# Custom filter
app.jinja_env.filters["per_hundred"] = per_hundred

# Configure session to use filesystem (instead of signed cookies)
app.config["SESSION_CACHELIB"] = FileSystemCache(mkdtemp())
app.config["SESSION_PERMANENT"] = False
app.config["SESSION_TYPE"] = "cachelib"
Session(app)


@app.route("/", methods=["GET", "POST"])
def index():
    """Grade a piece of text"""

    # User submits the text via POST
    if request.method == "POST":
        text = request.form.get("text")

        if not text or not text.strip():
            return apology("Must provide text", 400)

        # The form may send several lines, grade them as one
        text = " ".join(text.splitlines())

        result = analyze(text)
        stats = result.stats
        app.logger.info("Graded %d words as %s", stats.words, result)

        # Most recent analysis first
        history = session.get("history", [])
        history.insert(0, {
            "text": text,
            "grade": str(result),
            "letters": stats.letters,
            "words": stats.words,
            "sentences": stats.sentences
        })
        session["history"] = history[:app.config["HISTORY_LIMIT"]]

        return render_template("graded.html", text=text, result=result,
                               L=stats.letters / stats.words * 100.0,
                               S=stats.sentences / stats.words * 100.0)

    # Display the form if the user requests it via GET
    else:
        return render_template("index.html")


@app.route("/history")
def history():
    """Show texts graded during this session"""
    return render_template("history.html", history=session.get("history", []))


@app.route("/clear")
def clear():
    """Forget graded texts"""

    session.clear()

    # Redirect user to the form
    return redirect("/")


def errorhandler(e):
    """Handle error"""
    if not isinstance(e, HTTPException):
        e = InternalServerError()
    return apology(e.name, e.code)


# Listen for errors
for code in default_exceptions:
    app.errorhandler(code)(errorhandler)
