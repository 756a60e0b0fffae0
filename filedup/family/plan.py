"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    plan.py                                                                                              *
*        Project: filedup                                                                                              *
*        Version: 0.1.0                                                                                                *
*        Created: 2026-09-30                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2026 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-11     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations

from filedup.family.classifier import Classification
from filedup.family.resolver import RetentionDecision, ReplaceOriginal

HEADER_RULE = '-' * 30

def comment(*parts : str) -> str:
    return '# ' + ' '.join(parts)

def remove(path : str, reason : str | None = None) -> str:
    line = f'rm "{path}"'
    if reason:
        line = f'{line} # {reason}'
    return line

def rename(source : str, target : str) -> str:
    return f'mv "{source}" "{target}"'

def render(classification : Classification, decision : RetentionDecision) -> list[str]:
    """
    Render a family's trace and decision as shell-style plan lines.

    Example:
        # ------------------------------ doc.pdf 5d41402abc4b2a76b9719d911017c592
        # doc (1).pdf 5d41402abc4b2a76b9719d911017c592
        rm "doc (1).pdf" # doc.pdf
        # doc (2).pdf 7d793037a0760186574b0282f2f435e7
        rm "doc.pdf"
        mv "doc (2).pdf" "doc.pdf"
    """
    if not classification.members:
        return []

    original = classification.original
    lines = [comment(HEADER_RULE, original, classification.digest)]

    for member in classification.members:
        lines.append(comment(member.path, member.digest))
        if member.exact:
            lines.append(remove(member.path, original))

    if isinstance(decision, ReplaceOriginal):
        lines.append(remove(original))
        lines.extend(remove(path) for path in decision.discarded)
        lines.append(rename(decision.survivor, original))

    return lines

def render_text(classification : Classification, decision : RetentionDecision) -> str:
    return '\n'.join(render(classification, decision))
