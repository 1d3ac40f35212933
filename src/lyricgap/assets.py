"""Static parts of the exported quiz page: presentation rules and runtime.

``RUNTIME_JS`` is the in-page twin of :mod:`lyricgap.scoring`.  It reads the
``#quiz-data`` JSON block (``{"words": [...], "text": {...}}``), fills every
``<select>`` whose id matches a word, and implements check / reveal with the
same transitions and strings.  Every string it inserts goes through
``textContent`` or ``option.value``, never ``innerHTML``.

The current :class:`~lyricgap.scoring.GameState` value is kept on
``<body data-state>``; ``STYLE_CSS`` sets revealed answers in italics from it.
"""

STYLE_CSS = """
[hidden] { display: none !important; }
body {
    font-family: 'Inter', system-ui, sans-serif;
    background-color: #f4f4f9;
    color: #333;
    display: flex;
    justify-content: center;
    align-items: flex-start;
    padding: 2rem;
    min-height: 100vh;
    margin: 0;
}
.container {
    max-width: 800px;
    width: 100%;
    background: #fff;
    padding: 2rem;
    border-radius: 12px;
    box-shadow: 0 4px 20px rgba(0, 0, 0, 0.1);
    animation: fadeIn 0.8s ease-out;
}
@keyframes fadeIn {
    from { opacity: 0; transform: translateY(20px); }
    to { opacity: 1; transform: translateY(0); }
}
h1 {
    text-align: center;
    color: #4a69bd;
    font-size: 2.25rem;
    margin-bottom: 1.5rem;
}
.audio-player {
    display: flex;
    justify-content: center;
    margin-bottom: 2rem;
}
audio { width: 100%; max-width: 500px; }
.lyrics p { font-size: 1.125rem; margin: 1.5rem 0; line-height: 2; }
.dropdown {
    display: inline-block;
    margin: 0 4px;
    padding: 6px 12px;
    border-radius: 8px;
    border: 2px solid #ccc;
    background-color: #f0f4f8;
    transition: all 0.2s ease-in-out;
    cursor: pointer;
    font-size: 1rem;
}
.dropdown:hover { border-color: #4a69bd; box-shadow: 0 0 5px rgba(74, 105, 189, 0.5); }
.dropdown.correct { border-color: #28a745; background-color: #d4edda; color: #155724; }
.dropdown.incorrect { border-color: #dc3545; background-color: #f8d7da; color: #721c24; }
body[data-state="revealed"] .dropdown.correct { font-style: italic; }
.buttons {
    display: flex;
    justify-content: center;
    gap: 1rem;
    margin-top: 2rem;
    flex-wrap: wrap;
}
.button {
    padding: 12px 24px;
    font-size: 1rem;
    cursor: pointer;
    border: none;
    border-radius: 9999px;
    color: #fff;
    background-color: #4a69bd;
    transition: all 0.3s ease;
    box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
}
.button:hover { background-color: #2e529a; transform: translateY(-2px); }
.result { text-align: center; margin-top: 1.5rem; font-size: 1.25rem; font-weight: 700; }
.result.correct { color: #155724; }
.result.incorrect { color: #721c24; }
.popup, .intro-popup {
    position: fixed;
    top: 50%;
    left: 50%;
    transform: translate(-50%, -50%);
    background-color: #fff;
    padding: 2rem;
    border-radius: 12px;
    box-shadow: 0 8px 25px rgba(0, 0, 0, 0.2);
    z-index: 1000;
    text-align: center;
    border: 2px solid #4a69bd;
    max-width: 90%;
    width: 400px;
}
.popup-overlay, .intro-overlay {
    position: fixed;
    top: 0;
    left: 0;
    width: 100%;
    height: 100%;
    background-color: rgba(0, 0, 0, 0.5);
    z-index: 999;
}
.popup-summary { text-align: left; margin-top: 1rem; }
.popup-summary p { margin: 0.5rem 0; }
.copied { margin-top: 10px; color: #28a745; font-weight: 700; }
.intro-popup input {
    padding: 8px;
    border: 2px solid #ccc;
    border-radius: 8px;
    margin: 1rem 0;
    width: 100%;
    box-sizing: border-box;
}
"""

RUNTIME_JS = r"""
(function () {
  "use strict";

  var payload = JSON.parse(document.getElementById("quiz-data").textContent);
  var words = payload.words;
  var text = payload.text;
  var playerName = "";

  function shuffle(items) {
    for (var i = items.length - 1; i > 0; i--) {
      var j = Math.floor(Math.random() * (i + 1));
      var tmp = items[i];
      items[i] = items[j];
      items[j] = tmp;
    }
    return items;
  }

  function format(template, values) {
    return template.replace(/\{(\w+)\}/g, function (whole, key) {
      return key in values ? String(values[key]) : whole;
    });
  }

  function control(word) {
    return document.getElementById(word.id);
  }

  function setState(state) {
    document.body.setAttribute("data-state", state);
  }

  function setMark(select, mark) {
    select.classList.remove("correct", "incorrect");
    if (mark) select.classList.add(mark);
  }

  function showMessage(message, tone) {
    var result = document.getElementById("result");
    result.textContent = message;
    result.className = tone ? "result " + tone : "result";
  }

  function populate() {
    words.forEach(function (word) {
      var select = control(word);
      if (!select) return;
      var placeholder = document.createElement("option");
      placeholder.value = "";
      placeholder.textContent = text.placeholder;
      placeholder.disabled = true;
      placeholder.selected = true;
      select.appendChild(placeholder);
      shuffle(word.options.slice()).forEach(function (value) {
        var option = document.createElement("option");
        option.value = value;
        option.textContent = value;
        select.appendChild(option);
      });
      // A new choice clears this control's mark only.
      select.addEventListener("change", function () {
        setMark(select, null);
      });
    });
  }

  function check() {
    var correct = 0;
    var complete = true;
    closeSummary();
    words.forEach(function (word) {
      var select = control(word);
      var value = select ? select.value : "";
      var ok = value === word.answer;
      if (value === "") complete = false;
      if (ok) correct++;
      if (select) setMark(select, ok ? "correct" : "incorrect");
    });
    setState("checked");

    if (!complete) {
      showMessage(text.incomplete, "incorrect");
      return;
    }
    showMessage(format(text.score, { correct: correct, total: words.length }), null);
    showSummary({
      player: playerName || text.anonymous,
      date: new Date().toLocaleDateString(text.locale),
      correct: correct,
      errors: words.length - correct
    });
  }

  function reveal() {
    words.forEach(function (word) {
      var select = control(word);
      if (!select) return;
      select.value = word.answer;
      setMark(select, "correct");
    });
    closeSummary();
    setState("revealed");
    showMessage(text.revealed, "correct");
  }

  // --- Completion summary ---

  function summaryLines(summary) {
    return [
      text.name + " : " + summary.player,
      text.date + " : " + summary.date,
      text.correct + " : " + summary.correct,
      text.errors + " : " + summary.errors
    ];
  }

  function button(label, onClick) {
    var element = document.createElement("button");
    element.type = "button";
    element.className = "button";
    element.textContent = label;
    element.addEventListener("click", onClick);
    return element;
  }

  function showSummary(summary) {
    var overlay = document.createElement("div");
    overlay.className = "popup-overlay";
    var popup = document.createElement("div");
    popup.className = "popup";

    var heading = document.createElement("h2");
    heading.textContent = text.summary_title;
    popup.appendChild(heading);

    var body = document.createElement("div");
    body.className = "popup-summary";
    summaryLines(summary).forEach(function (line) {
      var paragraph = document.createElement("p");
      paragraph.textContent = line;
      body.appendChild(paragraph);
    });
    popup.appendChild(body);

    var actions = document.createElement("div");
    actions.className = "buttons";
    actions.appendChild(button(text.copy, function () {
      copySummary(popup, summary);
    }));
    actions.appendChild(button(text.close, closeSummary));
    popup.appendChild(actions);

    document.body.appendChild(overlay);
    document.body.appendChild(popup);
  }

  function copySummary(popup, summary) {
    var content = [text.summary_title + " :"].concat(summaryLines(summary)).join("\n");
    var done = function () {
      var note = document.createElement("div");
      note.className = "copied";
      note.textContent = text.copied;
      popup.appendChild(note);
    };
    if (navigator.clipboard && navigator.clipboard.writeText) {
      navigator.clipboard.writeText(content).then(done, function () {
        legacyCopy(content);
        done();
      });
    } else {
      legacyCopy(content);
      done();
    }
  }

  function legacyCopy(content) {
    var area = document.createElement("textarea");
    area.value = content;
    document.body.appendChild(area);
    area.select();
    document.execCommand("copy");
    document.body.removeChild(area);
  }

  function closeSummary() {
    document.querySelectorAll(".popup, .popup-overlay").forEach(function (element) {
      element.remove();
    });
  }

  function start() {
    playerName = document.getElementById("player-name").value.trim();
    document.getElementById("intro").hidden = true;
    document.getElementById("intro-overlay").hidden = true;
    document.getElementById("game").hidden = false;
  }

  document.addEventListener("DOMContentLoaded", function () {
    populate();
    setState("unanswered");
    document.getElementById("start-button").addEventListener("click", start);
    document.getElementById("check-button").addEventListener("click", check);
    document.getElementById("reveal-button").addEventListener("click", reveal);
  });
})();
"""
