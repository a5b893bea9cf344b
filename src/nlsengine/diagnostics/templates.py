"""Error message templates.

Centralized diagnostic constructors for consistent, testable error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors.
    """

    @staticmethod
    def unknown_key(module_key: str) -> Diagnostic:
        """Host lookup for a module key absent from the key resource.

        Args:
            module_key: Module key passed by the call site

        Returns:
            Diagnostic for UNKNOWN_KEY (warning)
        """
        msg = f"Module key '{module_key}' not found in key resource"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_KEY,
            message=msg,
            module_id=module_key,
            severity="warning",
        )

    @staticmethod
    def unknown_index(module_key: str, index: object, size: int) -> Diagnostic:
        """Host lookup with an index outside the module's key list.

        Args:
            module_key: Module key passed by the call site
            index: Index passed by the call site
            size: Number of keys known for the module

        Returns:
            Diagnostic for UNKNOWN_INDEX (warning)
        """
        msg = f"Key index {index} out of range for {size} keys of '{module_key}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_INDEX,
            message=msg,
            module_id=module_key,
            severity="warning",
        )

    @staticmethod
    def index_out_of_range(index: int, size: int) -> Diagnostic:
        """Scoped localizer index outside the bound slice.

        Args:
            index: Index passed by the call site
            size: Number of messages in the slice

        Returns:
            Diagnostic for INDEX_OUT_OF_RANGE
        """
        msg = f"Message index {index} out of range for {size} messages"
        return Diagnostic(
            code=DiagnosticCode.INDEX_OUT_OF_RANGE,
            message=msg,
            hint="Rebuild the message bundle or check the index used at the call site",
        )

    @staticmethod
    def invalid_index_type(index: object) -> Diagnostic:
        """Scoped localizer called with a non-integer index.

        Args:
            index: Value passed as index

        Returns:
            Diagnostic for INVALID_INDEX_TYPE
        """
        msg = f"Message index must be an int, got {type(index).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INDEX_TYPE,
            message=msg,
            hint="Scoped localizers address messages by position",
        )

    @staticmethod
    def invalid_resource_shape(resource_name: str, payload: object) -> Diagnostic:
        """Loader payload is neither a list nor a mapping.

        Args:
            resource_name: Name of the fetched resource
            payload: Payload returned by the loader

        Returns:
            Diagnostic for RESOURCE_INVALID_SHAPE
        """
        msg = (
            f"Resource '{resource_name}' must contain a list or a mapping, "
            f"got {type(payload).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_INVALID_SHAPE,
            message=msg,
            resource_name=resource_name,
        )

    @staticmethod
    def module_missing(module_id: str, resource_name: str) -> Diagnostic:
        """Nested bundle has no slice for the requested module.

        Args:
            module_id: Module that was requested
            resource_name: Resource that was fetched

        Returns:
            Diagnostic for RESOURCE_MODULE_MISSING
        """
        msg = f"Bundle '{resource_name}' has no messages for module '{module_id}'"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_MODULE_MISSING,
            message=msg,
            module_id=module_id,
            resource_name=resource_name,
        )

    @staticmethod
    def resource_not_flat(resource_name: str, payload: object) -> Diagnostic:
        """Build resource is not a flat list.

        Args:
            resource_name: Name of the fetched resource
            payload: Payload returned by the loader

        Returns:
            Diagnostic for RESOURCE_NOT_FLAT
        """
        msg = f"Resource '{resource_name}' must contain a list, got {type(payload).__name__}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_NOT_FLAT,
            message=msg,
            hint="Build capture reads untranslated per-module resources only",
            resource_name=resource_name,
        )

    @staticmethod
    def capture_length_mismatch(module_id: str, messages: int, keys: int) -> Diagnostic:
        """Captured message and key lists differ in length.

        Args:
            module_id: Captured module
            messages: Number of messages
            keys: Number of keys

        Returns:
            Diagnostic for CAPTURE_LENGTH_MISMATCH
        """
        msg = f"Module '{module_id}' has {messages} messages but {keys} keys"
        return Diagnostic(
            code=DiagnosticCode.CAPTURE_LENGTH_MISMATCH,
            message=msg,
            hint="Regenerate the .nls and .nls.keys resources together",
            module_id=module_id,
        )

    @staticmethod
    def capture_conflict(module_id: str) -> Diagnostic:
        """Module captured twice with different data.

        Args:
            module_id: Captured module

        Returns:
            Diagnostic for CAPTURE_CONFLICT (warning)
        """
        msg = f"Module '{module_id}' captured again with different data; keeping first capture"
        return Diagnostic(
            code=DiagnosticCode.CAPTURE_CONFLICT,
            message=msg,
            module_id=module_id,
            severity="warning",
        )

    @staticmethod
    def entry_point_missing(module_id: str) -> Diagnostic:
        """Bundle requested for a module nothing was recorded against.

        Args:
            module_id: Module passed as entry point

        Returns:
            Diagnostic for ENTRY_POINT_MISSING (warning)
        """
        msg = f"Module '{module_id}' is not an entry point; no bundle emitted"
        return Diagnostic(
            code=DiagnosticCode.ENTRY_POINT_MISSING,
            message=msg,
            module_id=module_id,
            severity="warning",
        )

    @staticmethod
    def dependent_not_captured(module_id: str, entry_point: str) -> Diagnostic:
        """Entry point lists a dependent whose messages were never captured.

        Args:
            module_id: Dependent module
            entry_point: Entry point being emitted

        Returns:
            Diagnostic for DEPENDENT_NOT_CAPTURED (warning)
        """
        msg = f"Module '{module_id}' bundled into '{entry_point}' has no captured messages"
        return Diagnostic(
            code=DiagnosticCode.DEPENDENT_NOT_CAPTURED,
            message=msg,
            module_id=module_id,
            severity="warning",
        )

    @staticmethod
    def config_invalid_type(field_name: str, expected: str, value: object) -> Diagnostic:
        """Configuration field has the wrong type.

        Args:
            field_name: Name of the configuration field
            expected: Description of the expected type
            value: Value received

        Returns:
            Diagnostic for CONFIG_INVALID_TYPE
        """
        msg = f"{field_name} must be {expected}, got {type(value).__name__}"
        return Diagnostic(code=DiagnosticCode.CONFIG_INVALID_TYPE, message=msg)

    @staticmethod
    def config_empty_language(module_id: str) -> Diagnostic:
        """Language map entry with an empty tag.

        Args:
            module_id: Language map key

        Returns:
            Diagnostic for CONFIG_EMPTY_LANGUAGE
        """
        msg = f"Language for '{module_id}' is empty"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_EMPTY_LANGUAGE,
            message=msg,
            hint="Remove the entry or use 'i-default' for untranslated resources",
            module_id=module_id,
        )

    @staticmethod
    def config_unknown_language(module_id: str, language: str) -> Diagnostic:
        """Language tag not recognized by CLDR.

        Args:
            module_id: Language map key
            language: Unrecognized tag

        Returns:
            Diagnostic for CONFIG_UNKNOWN_LANGUAGE
        """
        msg = f"Unknown language '{language}' configured for '{module_id}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_UNKNOWN_LANGUAGE,
            message=msg,
            hint="Use a CLDR locale identifier such as 'de', 'pt-br' or 'zh-tw'",
            module_id=module_id,
        )
