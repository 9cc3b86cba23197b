"""Node type names from the tree-sitter JavaScript and TypeScript grammars."""

COMMENT_TYPES = frozenset({"comment", "html_comment"})

# Construct nodes
STATEMENT_BLOCK = "statement_block"
OBJECT = "object"
SWITCH_STATEMENT = "switch_statement"
SWITCH_CASE_TYPES = frozenset({"switch_case", "switch_default"})
CLASS_BODY = "class_body"
INTERFACE_BODY = "interface_body"
# Older tree-sitter-typescript releases give interfaces an object_type body
OBJECT_TYPE = "object_type"
INTERFACE_DECLARATION = "interface_declaration"

# Parents that specialize a statement_block
IF_STATEMENT = "if_statement"
ELSE_CLAUSE = "else_clause"
FOR_STATEMENT = "for_statement"
FOR_IN_STATEMENT = "for_in_statement"  # covers both for-in and for-of
WHILE_STATEMENT = "while_statement"
DO_STATEMENT = "do_statement"
FUNCTION_DECLARATION_TYPES = frozenset({"function_declaration", "generator_function_declaration"})
FUNCTION_EXPRESSION_TYPES = frozenset(
    {"function_expression", "function", "generator_function", "method_definition"}
)
ARROW_FUNCTION = "arrow_function"
TRY_STATEMENT = "try_statement"
FINALLY_CLAUSE = "finally_clause"
CATCH_CLAUSE = "catch_clause"

# TypeScript namespace and ambient module bodies; not statement bodies
MODULE_BODY_PARENTS = frozenset({"internal_module", "module"})

ERROR = "ERROR"
