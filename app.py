import gradio as gr

from json_split_aom.handlers import (
    handle_array_path_change,
    prepare_upload_payload,
    split_handler,
)

# --- UI Definition ---
with gr.Blocks(title="JSON Split") as demo:
    gr.Markdown("# JSON Array Splitter")
    gr.Markdown("Upload JSON files and write each object of an array to its own file, named by its ID.")

    # State
    json_data_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON Files", file_types=[".json"], file_count="multiple")
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Select Paths")
            array_path_selector = gr.Dropdown(
                label="Array Path",
                choices=[],
                allow_custom_value=True,
                interactive=True,
            )
            id_path_selector = gr.Dropdown(
                label="ID Path (in each element)",
                choices=[],
                allow_custom_value=True,
                interactive=True,
                info="Must point to a string value.",
            )

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 3. Options")
            pretty_checkbox = gr.Checkbox(label="Pretty print output files", value=False)
            collisions_checkbox = gr.Checkbox(
                label="Allow ID collisions (duplicates overwrite earlier files)",
                value=False,
            )

            gr.Markdown("### 4. Split")
            split_btn = gr.Button("Split Files", variant="primary")
            split_status = gr.Textbox(label="Result", interactive=False)
            download_output = gr.File(label="Download Results", file_count="multiple")

    file_input.upload(
        fn=prepare_upload_payload,
        inputs=[file_input],
        outputs=[json_data_state, array_path_selector, id_path_selector, status_msg],
    )

    array_path_selector.change(
        fn=handle_array_path_change,
        inputs=[json_data_state, array_path_selector],
        outputs=[id_path_selector],
    )

    split_btn.click(
        fn=split_handler,
        inputs=[file_input, array_path_selector, id_path_selector, pretty_checkbox, collisions_checkbox],
        outputs=[download_output, split_status],
    )

if __name__ == "__main__":
    demo.launch()
