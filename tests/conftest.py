import pytest


REACT_HEADER_ONLY_DIFF = "diff --git a/src/Component.jsx b/src/Component.jsx\n"

REACT_HOOKS_DIFF = """\
diff --git a/src/Counter.tsx b/src/Counter.tsx
index 83db48f..bf269f4 100644
--- a/src/Counter.tsx
+++ b/src/Counter.tsx
@@ -1,3 +1,5 @@
+import { useState } from 'react';
+
 export function Counter() {
+  const [count, setCount] = useState(0);
   return <span>{count}</span>;
 }
"""

SQL_DROP_DIFF = """\
diff --git a/migrations/0042_cleanup.sql b/migrations/0042_cleanup.sql
new file mode 100644
--- /dev/null
+++ b/migrations/0042_cleanup.sql
@@ -0,0 +1,2 @@
+DROP TABLE users;
+DROP TABLE users;
"""

CSS_ONLY_DIFF = """\
diff --git a/styles/main.css b/styles/main.css
--- a/styles/main.css
+++ b/styles/main.css
@@ -1,3 +1,3 @@
 .button {
-  color: blue;
+  color: red;
 }
"""

PYTORCH_MODULE_DIFF = """\
diff --git a/model/net.py b/model/net.py
--- a/model/net.py
+++ b/model/net.py
@@ -1,4 +1,8 @@
+import torch
+from torch import nn
+
+class Net(nn.Module):
+    def __init__(self):
+        super().__init__()
+        self.opt = torch.optim.Adam(self.parameters())
"""

SQL_AND_AUTH_DIFF = """\
diff --git a/www/Sessions.php b/www/Sessions.php
--- a/www/Sessions.php
+++ b/www/Sessions.php
@@ -10,2 +10,4 @@
+  Auth::requireLogin($viewer);
+  $db->query("DELETE FROM sessions WHERE expired = 1");
"""

TODO_DIFF = """\
diff --git a/src/api.js b/src/api.js
--- a/src/api.js
+++ b/src/api.js
@@ -1,1 +1,2 @@
+// TODO: handle retries
 export const get = (url) => fetch(url);
"""


@pytest.fixture
def react_header_only_diff():
    return REACT_HEADER_ONLY_DIFF


@pytest.fixture
def react_hooks_diff():
    return REACT_HOOKS_DIFF


@pytest.fixture
def sql_drop_diff():
    return SQL_DROP_DIFF


@pytest.fixture
def css_only_diff():
    return CSS_ONLY_DIFF


@pytest.fixture
def pytorch_module_diff():
    return PYTORCH_MODULE_DIFF


@pytest.fixture
def sql_and_auth_diff():
    return SQL_AND_AUTH_DIFF


@pytest.fixture
def todo_diff():
    return TODO_DIFF


@pytest.fixture
def diff_file(tmp_path):
    """Write diff text to a temp file and return its path as a string."""
    def _write(text: str, name: str = "change.diff") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
