"""Gradio UI for Pixedit."""

import logging

import gradio as gr

from pixedit.core.config import config
from pixedit.core.edit_adapters import adapter_registry

from .handlers import (
    handle_image_select,
    handle_submit,
    start_edit,
    update_generate_button,
)
from .models import GENERATE_LABEL, INSTRUCTION_PLACEHOLDER, EditorState

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    custom_css = """
    .pixedit-title {
        text-align: center;
    }
    .pixedit-error {
        border: 1px solid #b91c1c;
        border-radius: 6px;
        padding: 8px 12px;
        text-align: center;
    }
    """

    app = gr.Blocks(title="Pixedit")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(EditorState())

        gr.Markdown(
            """
            # Pixedit
            ### Edit photos with text prompts using AI
            """,
            elem_classes="pixedit-title",
        )

        error_box = gr.Markdown(value="", visible=False, elem_classes="pixedit-error")

        # Shown until the first image is selected
        with gr.Column(visible=True) as upload_group:
            upload_input = gr.File(
                label="Click to upload an image (PNG or JPG)",
                file_types=config.accepted_file_types,
                type="filepath",
            )

        with gr.Column(visible=False) as editor_group:
            with gr.Row():
                with gr.Column():
                    original_preview = gr.Image(
                        label="Original Image",
                        type="pil",
                        interactive=False,
                        height=400,
                    )
                    change_input = gr.File(
                        label="Change Image",
                        file_types=config.accepted_file_types,
                        type="filepath",
                        height=80,
                    )
                with gr.Column():
                    edited_preview = gr.Image(
                        label="Edited Image",
                        type="pil",
                        interactive=False,
                        height=400,
                    )
                    download_button = gr.DownloadButton(
                        "Download edited image",
                        visible=False,
                        variant="primary",
                    )

            with gr.Group():
                instruction_input = gr.Textbox(
                    label="Your Editing Prompt",
                    placeholder=INSTRUCTION_PLACEHOLDER,
                    lines=3,
                )
                generate_button = gr.Button(
                    GENERATE_LABEL,
                    variant="primary",
                    interactive=False,
                )

        # Both pickers feed the same ingestion handler
        select_outputs = [
            upload_group,
            editor_group,
            original_preview,
            edited_preview,
            download_button,
            error_box,
            generate_button,
            ui_state,
        ]
        for picker in (upload_input, change_input):
            picker.upload(
                fn=handle_image_select,
                inputs=[picker, instruction_input, ui_state],
                outputs=select_outputs,
            )

        instruction_input.change(
            fn=update_generate_button,
            inputs=[instruction_input, ui_state],
            outputs=[generate_button],
        )

        generate_button.click(
            fn=start_edit,
            inputs=[ui_state],
            outputs=[
                generate_button,
                instruction_input,
                change_input,
                edited_preview,
                download_button,
                error_box,
                ui_state,
            ],
        ).then(
            fn=handle_submit,
            inputs=[instruction_input, ui_state],
            outputs=[
                edited_preview,
                download_button,
                error_box,
                generate_button,
                instruction_input,
                change_input,
                ui_state,
            ],
        )

    return app, custom_css


def main():
    """Main entry point for the application."""
    logger.info("Starting Pixedit...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")
    logger.info(f"Available edit adapters: {adapter_registry.list_available()}")

    if not config.api_key:
        logger.warning("PIXEDIT_API_KEY is not set; edit requests will fail")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
