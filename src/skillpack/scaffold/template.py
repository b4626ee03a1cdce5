"""Canonical SKILL.md template for new skills."""

from __future__ import annotations

from string import Template

SKILL_TEMPLATE: Template = Template(
    """---
name: $name
version: $version
description: $description
scope: $scope
created: $created
---

# $name

## Overview

<!-- Describe what this skill does and why it exists -->

## Rules

<!-- List the concrete rules the AI agent must follow -->

1.

## Examples

### ✅ Good

```
<!-- Show a correct example -->
```

### ❌ Bad

```
<!-- Show what to avoid -->
```

## $trigger

<!-- Add any additional context the AI needs -->
"""
)


def render_skill_document(
    *,
    name: str,
    version: str,
    description: str,
    scope: str,
    created: str,
    trigger: str,
) -> str:
    """Fill the template placeholders."""
    return SKILL_TEMPLATE.substitute(
        name=name,
        version=version,
        description=description,
        scope=scope,
        created=created,
        trigger=trigger,
    )
