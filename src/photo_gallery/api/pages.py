"""Static pages served alongside the gallery."""

from pathlib import Path

from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, Response

from photo_gallery.api.dependencies import get_container
from photo_gallery.containers import AppContainer

router = APIRouter(tags=["pages"])


def _page_file(directory: Path | None, name: str) -> Path | None:
    if directory is None:
        return None
    path = directory / name
    return path if path.is_file() else None


@router.get("/team")
async def team_page(container: AppContainer = Depends(get_container)) -> Response:
    """Serve the team page from the site directory."""
    path = _page_file(container.settings.site_dir, "team.html")
    if path is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": "Not found"}
        )
    return FileResponse(path)


@router.get("/admin")
async def admin_page(container: AppContainer = Depends(get_container)) -> Response:
    """Serve the admin front-end, or the built-in one if none is configured."""
    path = _page_file(container.settings.admin_dir, "index.html")
    if path is None:
        return HTMLResponse(_ADMIN_UI_HTML)
    return FileResponse(path)


_ADMIN_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Photo Gallery Admin</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 240px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      ul { list-style: none; padding: 0; }
      li { margin-bottom: 0.4rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Photo Gallery Admin</h1>
    <div class="row" id="login">
      <input id="username" placeholder="Username" />
      <input id="password" type="password" placeholder="Password" />
      <button onclick="login()">Log in</button>
      <button onclick="logout()">Log out</button>
    </div>
    <div class="row">
      <input id="photo" type="file" accept="image/*" />
      <button onclick="upload()">Upload</button>
      <button onclick="loadImages()">Refresh</button>
    </div>
    <ul id="images"></ul>
    <pre id="output">Ready.</pre>
    <script>
      let token = sessionStorage.getItem('token') || '';
      const output = document.getElementById('output');

      function authHeaders() {
        return token ? { Authorization: 'Bearer ' + token } : {};
      }

      async function login() {
        const res = await fetch('/api/login', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({
            username: document.getElementById('username').value,
            password: document.getElementById('password').value
          })
        });
        const data = await res.json();
        if (!res.ok) {
          output.textContent = 'Error: ' + data.error;
          return;
        }
        token = data.token;
        sessionStorage.setItem('token', token);
        output.textContent = data.message;
      }

      async function logout() {
        await fetch('/api/logout', { method: 'POST', headers: authHeaders() });
        token = '';
        sessionStorage.removeItem('token');
        output.textContent = 'Logged out.';
      }

      async function upload() {
        const file = document.getElementById('photo').files[0];
        if (!file) return;
        const form = new FormData();
        form.append('photo', file);
        const res = await fetch('/upload', {
          method: 'POST', headers: authHeaders(), body: form
        });
        output.textContent = JSON.stringify(await res.json(), null, 2);
        loadImages();
      }

      async function removeImage(name) {
        const res = await fetch('/api/delete/' + encodeURIComponent(name), {
          method: 'DELETE', headers: authHeaders()
        });
        output.textContent = JSON.stringify(await res.json(), null, 2);
        loadImages();
      }

      async function loadImages() {
        const res = await fetch('/api/gallery');
        const data = await res.json();
        const list = document.getElementById('images');
        list.innerHTML = '';
        for (const name of data.images || []) {
          const item = document.createElement('li');
          const button = document.createElement('button');
          button.textContent = 'Delete';
          button.onclick = () => removeImage(name);
          item.appendChild(button);
          item.appendChild(document.createTextNode(name));
          list.appendChild(item);
        }
      }

      loadImages();
    </script>
  </body>
</html>
"""
