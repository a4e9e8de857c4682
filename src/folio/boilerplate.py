"""Fixed page boilerplate wrapped around every rendered document.

The document title is inserted between ``HTML_HEADER_OPEN`` and
``HTML_HEADER_CLOSE`` (inside ``<title>``). ``HTML_HEADER_CLOSE`` ends the
head, carries the inline stylesheet and opens ``<body>``.

"""

HTML_HEADER_OPEN = (
    "<!DOCTYPE html>\n"
    '<html xmlns="http://www.w3.org/1999/xhtml">\n'
    "<head>\n"
    '<meta http-equiv="content-type" content="text/html; charset=UTF-8">\n'
    '<meta charset="utf-8">\n'
    '<meta name="generator" content="dascandy/fiets">\n'
    "<title>\n"
)

STYLESHEET = (
    "body {\n"
    "  margin: 5em;\n"
    "  font-family: sans-serif;\n"
    "  hyphens: auto;\n"
    "  line-height: 1.35;\n"
    "}\n"
    "ul {\n"
    "  padding-left: 2em;\n"
    "}\n"
    "h1, h2, h3, h4 {\n"
    "  position: relative;\n"
    "  line-height: 1;\n"
    "}\n"
    "a.self-link {\n"
    "  position: absolute;\n"
    "  top: 0;\n"
    "  left: calc(-1 * (3.5rem - 26px));\n"
    "  width: calc(3.5rem - 26px);\n"
    "  height: 2em;\n"
    "  text-align: center;\n"
    "  border: none;\n"
    "  transition: opacity .2s;\n"
    "  opacity: .5;\n"
    "  font-family: sans-serif;\n"
    "  font-weight: normal;\n"
    "  font-size: 83%;\n"
    "}\n"
    "a.self-link:hover { opacity: 1; }\n"
    'a.self-link::before { content: "§"; }\n'
    "span.identifier {\n"
    "  font-style: italic;\n"
    "}\n"
    "span.new {\n"
    "  text-decoration: underline;\n"
    "  background-color: #006e28;\n"
    "}\n"
    "span.code {\n"
    "  font-family: Courier New, monospace;\n"
    "  background-color: #e8e8e8;\n"
    "  white-space: pre;\n"
    "}\n"
    "span.delete {\n"
    "  text-decoration: line-through;\n"
    "  background-color: #bf0303;\n"
    "}\n"
    "p.indent {\n"
    "  margin-left: 50px;\n"
    "}\n"
    "table {\n"
    "  border: 1px solid black;\n"
    "  border-collapse: collapse;\n"
    "  margin-left: auto;\n"
    "  margin-right: auto;\n"
    "  margin-top: 0.8em;\n"
    "  text-align: left;\n"
    "  hyphens: none; \n"
    "}\n"
    "td, th {\n"
    "  padding-left: 1em;\n"
    "  padding-right: 1em;\n"
    "  vertical-align: top;\n"
    "}\n"
    "th {\n"
    "  border-bottom: 1px solid black;\n"
    "}\n"
)

HTML_HEADER_CLOSE = (
    "</title>\n"
    '  <style type="text/css">\n'
    + STYLESHEET
    + "</style>\n"
    "</head>\n"
    "<body>\n"
)

HTML_FOOTER = "</body></html>\n"

__all__ = ["HTML_FOOTER", "HTML_HEADER_CLOSE", "HTML_HEADER_OPEN", "STYLESHEET"]
