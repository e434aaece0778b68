"""Data-parameterized check families shared by the language rule sets."""

from polylint.lint.checks.control import (
    BlockMode,
    BraceStyle,
    ControlStructureRule,
    SwitchDefaultRule,
    TryHandlerRule,
)
from polylint.lint.checks.idioms import (
    NoneComparisonRule,
    NullComparisonRule,
    RedundantEqualsRule,
    StrictEqualityRule,
    StrictModeRule,
    VarDeclarationRule,
    VarUsageRule,
)
from polylint.lint.checks.imports import ImportPlacementRule, MultipleImportsRule
from polylint.lint.checks.indent_blocks import (
    EmptyIfRule,
    ExpectedIndentedBlockRule,
    MissingColonRule,
    MissingConditionRule,
)
from polylint.lint.checks.layout import (
    BraceOwnLineRule,
    BraceSameLineRule,
    EmptyLineRule,
    IndentationConsistencyRule,
    IndentationRule,
)
from polylint.lint.checks.markup import (
    AttributeQuotesRule,
    DocumentStructureRule,
    EmptyElementRule,
    ImageDimensionsRule,
    RequiredAttributesRule,
    TableStructureRule,
    TagCaseRule,
    TagClosingRule,
    TagSpellingRule,
)
from polylint.lint.checks.naming import KeywordCollisionRule, NamingConventionRule, NamingTarget
from polylint.lint.checks.quality import DuplicateLinesRule, ResourceLifecycleRule
from polylint.lint.checks.spacing import CommaSpacingRule, OperatorSpacingRule, OperatorTable
from polylint.lint.checks.statements import ExtraTerminatorRule, TerminatorRule

__all__ = [
    "AttributeQuotesRule",
    "BlockMode",
    "BraceOwnLineRule",
    "BraceSameLineRule",
    "BraceStyle",
    "CommaSpacingRule",
    "ControlStructureRule",
    "DocumentStructureRule",
    "DuplicateLinesRule",
    "EmptyElementRule",
    "EmptyIfRule",
    "EmptyLineRule",
    "ExpectedIndentedBlockRule",
    "ExtraTerminatorRule",
    "ImageDimensionsRule",
    "ImportPlacementRule",
    "IndentationConsistencyRule",
    "IndentationRule",
    "KeywordCollisionRule",
    "MissingColonRule",
    "MissingConditionRule",
    "MultipleImportsRule",
    "NamingConventionRule",
    "NamingTarget",
    "NoneComparisonRule",
    "NullComparisonRule",
    "OperatorSpacingRule",
    "OperatorTable",
    "RedundantEqualsRule",
    "RequiredAttributesRule",
    "ResourceLifecycleRule",
    "StrictEqualityRule",
    "StrictModeRule",
    "SwitchDefaultRule",
    "TableStructureRule",
    "TagCaseRule",
    "TagClosingRule",
    "TagSpellingRule",
    "TerminatorRule",
    "TryHandlerRule",
    "VarDeclarationRule",
    "VarUsageRule",
]
