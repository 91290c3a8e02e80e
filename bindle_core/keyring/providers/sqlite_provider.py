from __future__ import annotations
from typing import List
import json, sqlite3, os
from bindle_core.errors import KeyringNotFoundError
from bindle_core.keys import Keyring, SignatureKey
from bindle_core.keyring.provider import KeyringStore
from bindle_core.logger import get_logger
from bindle_core.roles import parse_role

log = get_logger("Bindle.Keyring.SQLite")


class SQLiteKeyringStore(KeyringStore):
    name = "sqlite"

    def __init__(self, path="db/keyring.db"):
        # If no directory, default to current working directory
        dir_path = os.path.dirname(path) or "."
        os.makedirs(dir_path, exist_ok=True)
        self.db = sqlite3.connect(path, check_same_thread=False)

        self._init()

    def _init(self) -> None:
        c = self.db.cursor()
        c.execute("""CREATE TABLE IF NOT EXISTS keyring_meta(
            id INTEGER PRIMARY KEY CHECK (id = 1),
            version TEXT NOT NULL
        )""")
        # position keeps keyring order stable across load/save
        c.execute("""CREATE TABLE IF NOT EXISTS keyring(
            position INTEGER PRIMARY KEY,
            label TEXT NOT NULL,
            roles TEXT NOT NULL,
            pubkey_b64 TEXT NOT NULL,
            label_signature TEXT
        )""")
        self.db.commit()

    def load(self) -> Keyring:
        row = self.db.execute("SELECT version FROM keyring_meta WHERE id = 1").fetchone()
        if row is None:
            raise KeyringNotFoundError("no keyring stored in database")

        cur = self.db.execute(
            "SELECT label, roles, pubkey_b64, label_signature FROM keyring ORDER BY position"
        )
        keys: List[SignatureKey] = []
        for label, roles, pubkey_b64, label_signature in cur.fetchall():
            keys.append(
                SignatureKey(
                    label=label,
                    roles=[parse_role(r) for r in json.loads(roles)],
                    key=pubkey_b64,
                    label_signature=label_signature or "",
                )
            )
        return Keyring(version=row[0], keys=keys)

    def save(self, keyring: Keyring) -> None:
        with self.db:
            self.db.execute(
                "INSERT INTO keyring_meta(id, version) VALUES(1, ?) "
                "ON CONFLICT(id) DO UPDATE SET version=excluded.version",
                (keyring.version,),
            )
            self.db.execute("DELETE FROM keyring")
            self.db.executemany(
                "INSERT INTO keyring(position, label, roles, pubkey_b64, label_signature) VALUES(?,?,?,?,?)",
                [
                    (i, k.label, json.dumps([r.value for r in k.roles]), k.key, k.label_signature)
                    for i, k in enumerate(keyring.keys)
                ],
            )
        log.info(f"[KEYRING] saved {len(keyring)} key(s) to sqlite")

    def close(self):
        self.db.close()
