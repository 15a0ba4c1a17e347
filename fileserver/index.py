"""Fixed landing page served on GET /."""

from .files import Kind, Outcome

INDEX_HTML = b"""<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>fileserver</title>
<style>body{font-family:system-ui,-apple-system,Segoe UI,Roboto,Arial; padding:24px}
h1{margin:0 0 12px} input,textarea{display:block; margin:8px 0; width:32em}
#status{font-family:monospace}</style>
</head>
<body>
<h1>fileserver</h1>
<p>Files are addressed by URL path: <code>GET /name</code> downloads,
<code>PUT /name</code> or <code>POST /name</code> stores the request body,
<code>DELETE /name</code> removes.</p>
<input id="name" placeholder="path, e.g. notes/today.txt">
<input id="file" type="file">
<textarea id="text" rows="6" placeholder="or type the contents here"></textarea>
<button onclick="upload()">Upload</button>
<button onclick="download()">Download</button>
<button onclick="remove()">Delete</button>
<p id="status"></p>
<script>
function target() {
  return "/" + document.getElementById("name").value.replace(/^\\/+/, "");
}
function report(method, res) {
  document.getElementById("status").textContent = method + " " + target() + " -> " + res.status;
}
async function upload() {
  const picked = document.getElementById("file").files[0];
  const body = picked || document.getElementById("text").value;
  report("PUT", await fetch(target(), {method: "PUT", body: body}));
}
function download() {
  window.location = target();
}
async function remove() {
  report("DELETE", await fetch(target(), {method: "DELETE"}));
}
</script>
</body>
</html>
"""


def respond(method: str) -> Outcome:
    if method == "GET":
        return Outcome(Kind.INDEX, INDEX_HTML)
    return Outcome(Kind.METHOD_NOT_ALLOWED)
