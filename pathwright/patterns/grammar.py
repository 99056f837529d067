"""
Grammar for pathwright route templates.

Grammar Specification
=====================

<template>    ::= <segment> ( "/" <segment> )*
<segment>     ::= <literal> | <placeholder>
<literal>     ::= any text without "/", "{" or "}" (may be empty)
<placeholder> ::= "{" <type> ":" <name> "}"
<type>        ::= "b" | "f" | "i" | "s"
<name>        ::= [A-Za-z0-9]+

A placeholder always fills a whole segment. A template that ends with
"/" accepts the request path with or without that final separator.

Built-in Types
==============
- b: boolean (true/false)
- f: float (digits, optional fraction)
- i: integer (digits)
- s: string (unreserved URL characters and percent-escapes)

Template Examples
=================
/users/{i:id}
/users/{i:id}/posts/{s:slug}
/prices/{f:amount}
/features/{b:enabled}/
"""

import re


# A segment shaped like a placeholder; the type is validated separately so
# unknown discriminators are reported instead of becoming literals.
PLACEHOLDER_RE = re.compile(r"\{(?P<type>[^{}:]*):(?P<name>[^{}]*)\}")

NAME_RE = re.compile(r"[A-Za-z0-9]+")

SEPARATOR = "/"

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD")

# Separator for methods given as a single string ("GET|POST")
METHOD_SEPARATOR = "|"
