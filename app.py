import gradio as gr

from json_tabulator.handlers import (
    SEPARATOR_CHOICES,
    UI_SEPARATOR,
    export_handler,
    handle_upload,
    preview_handler,
)
from json_tabulator.paths import ROOT_LABEL

# --- UI Definition ---
with gr.Blocks(title="JSON Tabulator") as demo:
    gr.Markdown("# JSON Tabulator")
    gr.Markdown("Upload JSON files holding arrays of objects and flatten them into one table.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON Files", file_types=[".json"], file_count="multiple")
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Locate Records")
            skip_path_selector = gr.Dropdown(
                label="Array Path (skip steps)",
                choices=[ROOT_LABEL],
                value=ROOT_LABEL,
                allow_custom_value=True,
                interactive=True,
                info="Dotted keys or indices leading to the array, e.g. data.items or data.0",
            )
            keep_prefix = gr.Checkbox(label="Prefix columns with the array path", value=True)
            record_count = gr.Textbox(label="Record Count", interactive=False)
            load_preview_btn = gr.Button("Load Preview")

        # Right Panel: Output
        with gr.Column(scale=2):
            gr.Markdown("### 3. Preview")
            table_preview = gr.Dataframe(label="Preview", interactive=False)

            gr.Markdown("### 4. Export")
            separator = gr.Dropdown(
                label="Separator",
                choices=SEPARATOR_CHOICES,
                value=UI_SEPARATOR,
                allow_custom_value=True,
                interactive=True,
            )
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="output")
            export_btn = gr.Button("Export Table", variant="primary")
            download_output = gr.File(label="Download Result")

    file_input.upload(
        fn=handle_upload,
        inputs=[file_input],
        outputs=[skip_path_selector, status_msg],
    )

    load_preview_btn.click(
        fn=preview_handler,
        inputs=[file_input, skip_path_selector, keep_prefix],
        outputs=[table_preview, record_count, status_msg],
    )

    export_btn.click(
        fn=export_handler,
        inputs=[file_input, skip_path_selector, keep_prefix, separator, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
