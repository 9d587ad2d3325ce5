[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherkit"
version = "0.1.0"
description = "Classical ciphers and simple cryptanalysis tools: Caesar, Vigenere, Hill, rail fence, route, n-gram analysis and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cipher",
    "classical-cryptography",
    "caesar",
    "vigenere",
    "hill",
    "rail-fence",
    "transposition",
    "substitution",
    "cryptanalysis",
    "ngram",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cipherkit-affine = "cipherkit.affine:main"
cipherkit-atbash = "cipherkit.atbash:main"
cipherkit-august = "cipherkit.august:main"
cipherkit-autokey = "cipherkit.autokey:main"
cipherkit-beaufort = "cipherkit.beaufort:main"
cipherkit-caesar = "cipherkit.caesar:main"
cipherkit-gronsfeld = "cipherkit.gronsfeld:main"
cipherkit-vigenere = "cipherkit.vigenere:main"
cipherkit-hill = "cipherkit.hill:main"
cipherkit-myszkowski = "cipherkit.myszkowski:main"
cipherkit-rail-fence = "cipherkit.rail_fence:main"
cipherkit-ngram = "cipherkit.ngram:main"
cipherkit-route = "cipherkit.route:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
