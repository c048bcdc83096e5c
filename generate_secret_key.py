#!/usr/bin/env python3
import os
import sys
import secrets
from dotenv import load_dotenv


def generate_secret_key(length=32):
    """Generate a random hex key suitable for signing JWTs"""
    return secrets.token_hex(length)


def update_env_file(secret_key, env_file=".env"):
    """Write JWT_SECRET into the .env file, replacing any existing value"""
    if not os.path.exists(env_file):
        with open(env_file, "w") as f:
            f.write(f"JWT_SECRET={secret_key}\n")
        print(f"Created {env_file} with a new JWT_SECRET")
        return

    load_dotenv(env_file)
    current_key = os.getenv("JWT_SECRET")
    with open(env_file, "r") as f:
        content = f.read()

    if current_key and f"JWT_SECRET={current_key}" in content:
        content = content.replace(f"JWT_SECRET={current_key}", f"JWT_SECRET={secret_key}")
        print(f"Updated JWT_SECRET in {env_file}")
    else:
        content = content.rstrip("\n") + f"\nJWT_SECRET={secret_key}\n"
        print(f"Appended JWT_SECRET to {env_file}")

    with open(env_file, "w") as f:
        f.write(content)


if __name__ == "__main__":
    key = generate_secret_key()
    print(f"Generated key: {key}")

    if "--write" in sys.argv:
        update_env_file(key)
    else:
        print("Run with --write to store it in .env")
