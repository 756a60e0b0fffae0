from filedup.family.classifier import Classification, ClassifiedMember, classify
from filedup.family.matcher import FamilyIndex, match_family
from filedup.family.plan import render, render_text
from filedup.family.resolver import NoAction, RemoveExactDuplicatesOnly, ReplaceOriginal, RetentionDecision, resolve
from filedup.family.runner import DistributorConfig, FamilyRunner, WorkDistributor

__all__ = [
    'Classification',
    'ClassifiedMember',
    'DistributorConfig',
    'FamilyIndex',
    'FamilyRunner',
    'NoAction',
    'RemoveExactDuplicatesOnly',
    'ReplaceOriginal',
    'RetentionDecision',
    'WorkDistributor',
    'classify',
    'match_family',
    'render',
    'render_text',
    'resolve',
]
