"""Prompt assembly: wraps the rendered layout in code-generation instructions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from figscribe.config.models import PromptConfig, RenderConfig
from figscribe.nodes.models import Node
from figscribe.nodes.selection import select_supported
from figscribe.prompt.models import GenerateRequest
from figscribe.render.renderer import render_nodes

logger = logging.getLogger(__name__)

TITLE_TEMPLATE = """\
Create a reusable and performant {framework} Component with the following specifications, \
add it to the existing project or create a new {framework} project:
"""

OVERVIEW_TEMPLATE = """\
### Overview:
- **Description**: {description}
- **Type**: A {framework} that includes all underlying components and instances.
- **Framework**: {framework} (use appropriate syntax for type safety) Typescript if the framework supports it
- **Accessibility**: Ensure all components are accessible by using appropriate ARIA attributes.
- **Performance**: Optimize the code for performance, following the selected framework's best practices.
- **Reusability**: All components and styles must be reusable.
- **Global CSS**: All CSS must be stored in a single global CSS file or theme file.\
"""

DATABASE_TEMPLATE = (
    "- **Database**: Provide the {database} schema to create the database table for any input fields."
)

LAYOUT_TEMPLATE = """\
### Layout:
- This layout is created based on the selected nodes from Figma.
{layout}\
"""

IMPLEMENTATION_TEMPLATE = """\
### Implementation:
- Create all underlying components with their different variations.
- Use {framework} hooks like `useState` for managing internal state if necessary, \
particularly for managing hover effects if not using CSS hover.
- Ensure the component uses flexbox for aligning icon and text horizontally (if applicable).
- Use `role` attributes where necessary to define the semantic role of the elements.
- Use `aria-label` to provide descriptive labels for interactive elements.
- Use `aria-expanded` for elements that expand or collapse content.
- Follow the selected framework's coding best practices and standards.
- All styles must be defined in a global CSS file or theme file and applied using CSS classes.
- Swap the text icon with a randomly selected icon.
- Add validation for the input fields.\
"""

USAGE_SECTION = """\
### Usage:
- Include the component in your application.
- Use the component as needed in your application.
- Ensure the component is responsive and works on all screen sizes.
- Test the component on different browsers and devices to ensure compatibility.
- Ensure the component is accessible and meets all WCAG standards.
- Ensure the component is performant and does not impact the application's performance.
- Ensure the component is reusable and can be used in different parts of the application.\
"""


class PromptBuilder:
    """Builds the full code-generation prompt for a node selection."""

    def __init__(
        self,
        prompt_config: PromptConfig | None = None,
        render_config: RenderConfig | None = None,
    ) -> None:
        self.prompt_config = prompt_config or PromptConfig()
        self.render_config = render_config or RenderConfig()

    def build(self, selection: Sequence[Node], request: GenerateRequest) -> str:
        """Return the prompt, or the no-selection notice for an empty selection."""
        if not selection:
            logger.info("empty selection, returning notice")
            return self.prompt_config.no_selection_notice

        nodes = select_supported(selection)
        layout = render_nodes(nodes, indent_width=self.render_config.indent_width)
        logger.debug(
            "rendered %d of %d selected node(s) for %s",
            len(nodes),
            len(selection),
            request.framework,
        )

        sections = [
            TITLE_TEMPLATE.format(framework=request.framework),
            self._overview(request),
            LAYOUT_TEMPLATE.format(layout=layout),
            IMPLEMENTATION_TEMPLATE.format(framework=request.framework),
            USAGE_SECTION,
        ]
        return "\n\n".join(section.rstrip("\n") for section in sections) + "\n"

    @staticmethod
    def _overview(request: GenerateRequest) -> str:
        overview = OVERVIEW_TEMPLATE.format(
            description=request.description,
            framework=request.framework,
        )
        database = request.database_name
        if database:
            overview += "\n" + DATABASE_TEMPLATE.format(database=database)
        return overview


def build_prompt(
    selection: Sequence[Node],
    framework: str,
    database: str | None = None,
    description: str = "",
) -> str:
    """Convenience wrapper around PromptBuilder with default config."""
    request = GenerateRequest(framework=framework, database=database, description=description)
    return PromptBuilder().build(selection, request)
